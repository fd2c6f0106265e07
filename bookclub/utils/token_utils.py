# Standard library imports
from datetime import UTC, datetime, timedelta
from uuid import UUID

# Third-party imports
import jwt

# Local application imports
from bookclub.services.access import Identity, Role
from bookclub.services.exceptions import Unauthenticated
from bookclub.settings import settings


def create_access_token(user_id: UUID, role: Role | str, expires_minutes: int | None = None) -> str:
    """
    Issue an access token in the shape the identity provider uses.

    Only local development and the test-suite mint tokens; deployed
    instances receive them from the identity provider.
    """
    expires = datetime.now(UTC) + timedelta(minutes=expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": str(user_id),
        "role": Role(role).value,
        "token_type": "access",
        "exp": expires,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Identity:
    """
    Turn a bearer token into the caller's Identity.

    The claims are trusted verbatim once the signature checks out.

    Raises:
        Unauthenticated: If the token is expired, malformed or carries an
            unknown role.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise Unauthenticated("Token has expired")
    except jwt.PyJWTError:
        raise Unauthenticated("Invalid or expired token")

    if payload.get("token_type") != "access":  # nosec B105
        raise Unauthenticated("Invalid or expired token")

    try:
        user_id = UUID(payload["sub"])
        role = Role(payload.get("role", Role.MEMBER.value))
    except (KeyError, TypeError, ValueError):
        raise Unauthenticated("Invalid or expired token")

    return Identity(user_id=user_id, role=role)
