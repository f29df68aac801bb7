import secrets
from typing import Optional

from fastapi import Header, HTTPException, status

from discount_desk.core.settings import settings
from discount_desk.domain.auth import AdminIdentity

PASSCODE_HEADER = "x-admin-passcode"


def require_admin(
    x_admin_passcode: Optional[str] = Header(default=None, alias=PASSCODE_HEADER),
) -> AdminIdentity:
    expected = settings.ADMIN_PASSCODE
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="ADMIN_PASSCODE is not configured.",
        )

    entered = x_admin_passcode or ""
    if not secrets.compare_digest(entered.encode("utf-8"), expected.encode("utf-8")):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect passcode.",
        )

    return AdminIdentity()
