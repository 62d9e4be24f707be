"""
CardFolio — Out-of-band delivery of one-time codes
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Delivers a one-time code to the owner of an email address."""

    @abstractmethod
    async def send_otp(self, email: str, code: str, expires_at: datetime) -> None:
        ...


class LoggingNotifier(Notifier):
    """
    Stand-in for an email/SMS gateway: the code is written to the log.
    The login response also returns it as simulatedCode.
    """

    async def send_otp(self, email: str, code: str, expires_at: datetime) -> None:
        logger.info(
            "[SIMULATED EMAIL] to=%s 2FA code=%s expires=%s",
            email, code, expires_at.isoformat(),
        )
