# Third-party imports
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

# Local application imports
from bookclub.services.access import Identity
from bookclub.services.exceptions import Unauthenticated
from bookclub.utils.token_utils import decode_access_token

# Tokens come from the identity provider; auto_error is off so a missing
# token surfaces as our own Unauthenticated error.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token", auto_error=False)


async def get_current_identity(token: str | None = Depends(oauth2_scheme)) -> Identity:
    """Get the caller from the bearer token"""
    if not token:
        raise Unauthenticated("Could not validate credentials")
    return decode_access_token(token)
