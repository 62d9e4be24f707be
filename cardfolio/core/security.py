"""
CardFolio — Security utilities: identifiers, one-time codes, password hashing
"""
import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from passlib.context import CryptContext

from cardfolio.core.config import get_settings

settings = get_settings()

# bcrypt_sha256 prehashes, so passwords longer than 72 bytes are compared in full.
# Plain bcrypt and plaintext rows still verify and are rehashed on the next login.
pwd_context = CryptContext(
    schemes=["bcrypt_sha256", "bcrypt", "plaintext"],
    deprecated=["bcrypt", "plaintext"],
)

ID_ALPHABET = string.ascii_lowercase + string.digits

OTP_MIN = 100000
OTP_MAX = 999999


# ─── Identifiers ──────────────────────────────────────────────────────────────

def generate_id(length: int | None = None) -> str:
    """Short random alphanumeric identifier. Collisions are not checked."""
    size = length or settings.ID_LENGTH
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(size))


# ─── One-Time Codes ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class OneTimeCode:
    code: str
    expires_at: datetime


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def generate_otp(now: datetime | None = None, ttl_minutes: int | None = None) -> OneTimeCode:
    issued_at = now or utcnow()
    ttl = settings.OTP_TTL_MINUTES if ttl_minutes is None else ttl_minutes
    code = str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))
    return OneTimeCode(code=code, expires_at=issued_at + timedelta(minutes=ttl))


# ─── Password Hashing ─────────────────────────────────────────────────────────

def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(plain: str | None, stored: str | None) -> tuple[bool, str | None]:
    """
    Check a password against the stored value.
    Returns (valid, replacement_hash); replacement_hash is set when the
    stored value uses a deprecated scheme and should be rewritten.
    """
    if plain is None:
        return False, None
    return pwd_context.verify_and_update(plain, stored)
