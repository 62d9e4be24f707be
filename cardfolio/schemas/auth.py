"""
CardFolio — Authentication schemas
"""
from typing import Any
from pydantic import ConfigDict, Field

from cardfolio.schemas.base import CamelModel


class LoginRequest(CamelModel):
    email: str | None = Field(None, examples=["owner@cardfolio.local"])
    password: str | None = None


class LoginResponse(CamelModel):
    requires_2fa: bool = Field(True, alias="requires2FA")
    email: str
    simulated_code: str


class VerifyOtpRequest(CamelModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: str | None = None
    code: str | None = Field(None, examples=["493027"])


class VerifyOtpResponse(CamelModel):
    success: bool = True
    user: dict[str, Any]
