# Standard library imports
from uuid import uuid4

# Third-party imports
import pytest

# Local application imports
from bookclub.services.access import POLICY, Identity, Operation, Role, authorize, required_role
from bookclub.services.exceptions import Forbidden, Unauthenticated
from bookclub.utils.token_utils import create_access_token, decode_access_token

MEMBER_OPERATIONS = {
    Operation.PORTAL_LIST,
    Operation.SUGGESTION_SUBMIT,
    Operation.SUGGESTION_LIST,
    Operation.VOTE_CAST,
    Operation.VOTE_LIST_OWN,
}


def test_every_operation_has_a_policy_entry():
    assert set(POLICY) == set(Operation)


def test_administrative_operations_require_admin():
    for operation in Operation:
        expected = Role.MEMBER if operation in MEMBER_OPERATIONS else Role.ADMIN
        assert required_role(operation) == expected


def test_role_ordering():
    assert Role.SUPER_ADMIN.at_least(Role.ADMIN)
    assert Role.ADMIN.at_least(Role.MEMBER)
    assert not Role.MEMBER.at_least(Role.ADMIN)


def test_authorize_without_identity():
    with pytest.raises(Unauthenticated):
        authorize(None, Operation.SUGGESTION_LIST)


def test_member_cannot_manage_portal():
    member = Identity(user_id=uuid4(), role=Role.MEMBER)
    with pytest.raises(Forbidden):
        authorize(member, Operation.PORTAL_TOGGLE)


@pytest.mark.parametrize("role", [Role.ADMIN, Role.SUPER_ADMIN])
def test_admins_may_select_winner(role):
    identity = Identity(user_id=uuid4(), role=role)
    assert authorize(identity, Operation.SELECTION_SELECT_WINNER) is identity


def test_token_carries_identity():
    user_id = uuid4()
    identity = decode_access_token(create_access_token(user_id, Role.ADMIN))
    assert identity == Identity(user_id=user_id, role=Role.ADMIN)


def test_expired_token_is_rejected():
    token = create_access_token(uuid4(), Role.MEMBER, expires_minutes=-1)
    with pytest.raises(Unauthenticated):
        decode_access_token(token)


def test_garbage_token_is_rejected():
    with pytest.raises(Unauthenticated):
        decode_access_token("not-a-token")
