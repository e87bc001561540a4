"""
Authentication Dependencies

FastAPI dependencies for the BLiP ``Key`` Authorization header.

Only the ``Key `` prefix is checked here. The token after it is forwarded
to BLiP unchanged, and BLiP decides whether it is valid.

Type Aliases:
=============
    AuthorizationKey - Validated Authorization header value

Usage:
======
    from contacts_api.api.dependencies.auth import AuthorizationKey

    @router.get("/me")
    async def whoami(authorization: AuthorizationKey):
        ...
"""

from typing import Annotated, Optional

from fastapi import Depends, Security
from fastapi.security import APIKeyHeader

from contacts_api.shared.core.exceptions import AuthenticationError
from contacts_api.shared.core.logging import mask_authorization


AUTHORIZATION_PREFIX = "Key "

# Declared as a security scheme so the interactive reference offers an
# "Authorize" button. auto_error is off: a missing header must be a 401.
blip_key_header = APIKeyHeader(
    name="Authorization",
    scheme_name="BlipKey",
    description="The Authorization (Key) for the requested bot, e.g. `Key YmFneTpzMDVU...`",
    auto_error=False,
)


def check_authorization(authorization: Optional[str]) -> str:
    """
    Ensure the Authorization header uses the ``Key`` scheme.

    Args:
        authorization: Raw header value, None if absent

    Returns:
        The header value, unchanged

    Raises:
        AuthenticationError: If the header is missing or lacks the ``Key `` prefix
    """
    if authorization is None or not authorization.startswith(AUTHORIZATION_PREFIX):
        raise AuthenticationError(
            "Missing or incomplete Authorization header. "
            f"Given Authorization: {mask_authorization(authorization)}"
        )
    return authorization


async def get_authorization(
    authorization: Annotated[Optional[str], Security(blip_key_header)] = None,
) -> str:
    """
    Extract and check the Authorization header.

    Raises:
        AuthenticationError: If the header is missing or malformed
    """
    return check_authorization(authorization)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

AuthorizationKey = Annotated[str, Depends(get_authorization)]
