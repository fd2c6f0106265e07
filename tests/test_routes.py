# Standard library imports
from uuid import uuid4

# Local application imports
from bookclub.services.access import Identity, Role
from tests.factories import SYNOPSIS, auth_headers

API = "/api/v1"
JUNE_2025 = {"category": "fiction", "month": 6, "year": 2025}


def _suggestion_body(title: str, **overrides) -> dict:
    body = {"title": title, "author": "Ada Winters", "synopsis": SYNOPSIS, **JUNE_2025}
    body.update(overrides)
    return body


async def _open_portal(client, admin, **flags) -> dict:
    response = await client.post(f"{API}/portal", json={**JUNE_2025, **flags}, headers=auth_headers(admin))
    assert response.status_code == 200, response.text
    return response.json()


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_missing_token_is_unauthorized(client):
    response = await client.get(f"{API}/suggestions", params=JUNE_2025)

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json() == {"error": "Could not validate credentials", "code": "unauthorized"}


async def test_invalid_token_is_unauthorized(client):
    response = await client.get(
        f"{API}/suggestions", params=JUNE_2025, headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401


async def test_member_cannot_create_portal(client, member):
    response = await client.post(f"{API}/portal", json=JUNE_2025, headers=auth_headers(member))

    assert response.status_code == 403
    assert response.json()["code"] == "forbidden"


async def test_portal_status_is_public(client, admin):
    await _open_portal(client, admin, nomination_open=True)

    response = await client.get(f"{API}/portal/status", params=JUNE_2025)

    assert response.status_code == 200
    assert response.json()["nomination_open"] is True


async def test_unknown_portal_status_is_not_found(client):
    response = await client.get(f"{API}/portal/status", params=JUNE_2025)

    assert response.status_code == 404
    assert response.json()["code"] == "not_found"


async def test_duplicate_portal(client, admin):
    await _open_portal(client, admin)

    response = await client.post(f"{API}/portal", json=JUNE_2025, headers=auth_headers(admin))

    assert response.status_code == 400
    assert response.json()["code"] == "duplicate_kind"


async def test_both_windows_open_is_bad_request(client, admin):
    response = await client.post(
        f"{API}/portal",
        json={**JUNE_2025, "nomination_open": True, "voting_open": True},
        headers=auth_headers(admin),
    )

    assert response.status_code == 400
    assert response.json()["code"] == "bad_request"


async def test_invalid_month_is_bad_request(client, member):
    response = await client.get(
        f"{API}/suggestions", params={**JUNE_2025, "month": 13}, headers=auth_headers(member)
    )

    assert response.status_code == 400
    assert "month" in response.json()["details"]


async def test_submit_while_closed(client, admin, member):
    await _open_portal(client, admin)

    response = await client.post(f"{API}/suggestions", json=_suggestion_body("Dune"), headers=auth_headers(member))

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "portal_closed"
    assert body["error"] == "Nominations are closed for June 2025"


async def test_submit_with_short_synopsis(client, admin, member):
    await _open_portal(client, admin, nomination_open=True)

    response = await client.post(
        f"{API}/suggestions",
        json=_suggestion_body("Dune", synopsis="Spice."),
        headers=auth_headers(member),
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "bad_request"
    assert "synopsis" in body["details"]


async def test_vote_for_unknown_suggestion(client, member):
    response = await client.post(f"{API}/suggestions/{uuid4()}/votes", headers=auth_headers(member))

    assert response.status_code == 404


async def test_book_catalog_is_public(client, admin):
    created = await client.post(
        f"{API}/books",
        json={"title": "Middlemarch", "author": "George Eliot", **JUNE_2025},
        headers=auth_headers(admin),
    )
    assert created.status_code == 200, created.text

    listed = await client.get(f"{API}/books")
    assert [b["title"] for b in listed.json()] == ["Middlemarch"]

    fetched = await client.get(f"{API}/books/{created.json()['id']}")
    assert fetched.json()["author"] == "George Eliot"


async def test_book_club_month_end_to_end(client, admin, member, other_member):
    """A full fiction month: nominate, vote, select."""
    user_a, user_b, user_c = member, other_member, Identity(user_id=uuid4(), role=Role.MEMBER)

    portal = await _open_portal(client, admin)
    response = await client.put(
        f"{API}/portal/{portal['id']}", json={"nomination_open": True}, headers=auth_headers(admin)
    )
    assert response.json()["nomination_open"] is True

    suggestion_ids = []
    for title in ("First pick", "Second pick", "Third pick"):
        response = await client.post(
            f"{API}/suggestions", json=_suggestion_body(title), headers=auth_headers(user_a)
        )
        assert response.status_code == 200, response.text
        suggestion_ids.append(response.json()["id"])

    response = await client.post(
        f"{API}/suggestions", json=_suggestion_body("Fourth pick"), headers=auth_headers(user_a)
    )
    assert response.status_code == 400
    assert response.json()["code"] == "quota_exceeded"

    response = await client.put(
        f"{API}/portal/{portal['id']}", json={"voting_open": True}, headers=auth_headers(admin)
    )
    assert response.json()["nomination_open"] is False
    assert response.json()["voting_open"] is True

    winner_id = suggestion_ids[0]
    for voter, expected in ((user_b, 1), (user_c, 2)):
        response = await client.post(f"{API}/suggestions/{winner_id}/votes", headers=auth_headers(voter))
        assert response.status_code == 200, response.text
        assert response.json()["vote_count"] == expected

    response = await client.post(f"{API}/suggestions/{winner_id}/votes", headers=auth_headers(user_b))
    assert response.status_code == 400
    assert response.json()["code"] == "already_voted"

    response = await client.get(f"{API}/suggestions/votes/me", params=JUNE_2025, headers=auth_headers(user_b))
    assert response.json() == {"suggestion_ids": [winner_id]}

    leaderboard = await client.get(f"{API}/suggestions", params=JUNE_2025, headers=auth_headers(user_a))
    assert [s["id"] for s in leaderboard.json()] == suggestion_ids
    assert leaderboard.json()[0]["vote_count"] == 2

    response = await client.post(f"{API}/suggestions/{winner_id}/select", headers=auth_headers(member))
    assert response.status_code == 403

    response = await client.post(f"{API}/suggestions/{winner_id}/select", headers=auth_headers(admin))
    assert response.status_code == 200, response.text
    book = response.json()
    assert book["title"] == "First pick"
    assert (book["month"], book["year"], book["is_selected"]) == (6, 2025, True)

    status = (await client.get(f"{API}/portal/status", params=JUNE_2025)).json()
    assert status["nomination_open"] is False
    assert status["voting_open"] is False

    books = (await client.get(f"{API}/books", params={"category": "fiction"})).json()
    assert [b["id"] for b in books] == [book["id"]]


async def test_upcoming_periods_for_admins(client, admin, member):
    response = await client.get(f"{API}/portal/upcoming", headers=auth_headers(admin))

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 6
    assert all(entry["fiction_portal"] is None for entry in body)
    assert body[0]["non_fiction_month"] % 2 == 1

    response = await client.get(f"{API}/portal/upcoming", headers=auth_headers(member))
    assert response.status_code == 403
