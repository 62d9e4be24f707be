"""
CardFolio — Two-step login

  1. issue_login_code:  email + password → 6-digit code stored on the user row
  2. verify_login_code: email + code     → code cleared, user row returned

No lock guards the read-then-clear in step 2; each statement relies on the
database's own atomicity.
"""
import logging
from datetime import datetime
from typing import Any

from cardfolio.core.errors import InvalidCredentials, InvalidOrExpiredCode
from cardfolio.core.notifier import Notifier
from cardfolio.core.security import OneTimeCode, generate_otp, utcnow, verify_password
from cardfolio.db.database import Database

logger = logging.getLogger(__name__)


async def issue_login_code(
    db: Database,
    notifier: Notifier,
    email: str | None,
    password: str | None,
    now: datetime | None = None,
) -> OneTimeCode:
    """
    Check credentials and store a fresh one-time code on the user row.
    A new code replaces any pending one. Legacy plain-text passwords are
    rehashed in the same statement.
    """
    user = await db.fetch_one(
        "SELECT id, email, password FROM users WHERE email = :email", {"email": email}
    )
    valid, new_hash = verify_password(password, user["password"] if user else None)
    if not valid:
        logger.warning("Rejected credentials for %s", email)
        raise InvalidCredentials()

    otp = generate_otp(now=now)
    params: dict[str, Any] = {"code": otp.code, "expiry": otp.expires_at, "id": user["id"]}
    if new_hash:
        params["password"] = new_hash
        await db.execute(
            "UPDATE users SET otp_code = :code, otp_expiry = :expiry, password = :password "
            "WHERE id = :id",
            params,
        )
        logger.info("Upgraded stored password hash for %s", email)
    else:
        await db.execute(
            "UPDATE users SET otp_code = :code, otp_expiry = :expiry WHERE id = :id", params
        )

    await notifier.send_otp(user["email"], otp.code, otp.expires_at)
    return otp


async def verify_login_code(
    db: Database,
    email: str | None,
    code: str | None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Consume a pending code. Fails unless email, code and an unexpired deadline all match."""
    user = await db.fetch_one(
        "SELECT * FROM users WHERE email = :email AND otp_code = :code AND otp_expiry > :now",
        {"email": email, "code": code, "now": now or utcnow()},
    )
    if user is None:
        logger.warning("Rejected one-time code for %s", email)
        raise InvalidOrExpiredCode()

    await db.execute(
        "UPDATE users SET otp_code = NULL, otp_expiry = NULL WHERE id = :id", {"id": user["id"]}
    )
    user["otp_code"] = None
    user["otp_expiry"] = None
    return user
