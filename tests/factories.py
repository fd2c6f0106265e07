"""Builders shared by the test modules."""

# Local application imports
from bookclub.models import BookCategory
from bookclub.schemas.books import SuggestionCreate
from bookclub.services.access import Identity
from bookclub.utils.period_utils import Period
from bookclub.utils.token_utils import create_access_token

SYNOPSIS = (
    "A sweeping story about a family of lighthouse keepers and the storms "
    "that reshape their island over three generations."
)

FICTION_JUNE_2025 = Period(category=BookCategory.FICTION, month=6, year=2025)


def auth_headers(identity: Identity) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(identity.user_id, identity.role)}"}


def make_suggestion(
    title: str = "The Lighthouse Keepers",
    period: Period = FICTION_JUNE_2025,
    **overrides,
) -> SuggestionCreate:
    data = {
        "title": title,
        "author": "Ada Winters",
        "synopsis": SYNOPSIS,
        "image_url": None,
        "category": period.category,
        "month": period.month,
        "year": period.year,
    }
    data.update(overrides)
    return SuggestionCreate(**data)
