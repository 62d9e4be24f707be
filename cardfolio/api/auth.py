"""
CardFolio — Login API routes
"""
from fastapi import APIRouter, Depends

from cardfolio.api.deps import get_notifier
from cardfolio.core.notifier import Notifier
from cardfolio.db.database import Database, get_db
from cardfolio.schemas.auth import LoginRequest, LoginResponse, VerifyOtpRequest, VerifyOtpResponse
from cardfolio.services.auth import issue_login_code, verify_login_code

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    db: Database = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Step 1: validate credentials and issue a one-time code.
    The code is also returned as simulatedCode in place of real delivery.
    """
    otp = await issue_login_code(db, notifier, payload.email, payload.password)
    return LoginResponse(email=payload.email, simulated_code=otp.code)


@router.post("/verify-otp", response_model=VerifyOtpResponse)
async def verify_otp(payload: VerifyOtpRequest, db: Database = Depends(get_db)):
    """Step 2: exchange a valid, unexpired code for the user record."""
    user = await verify_login_code(db, payload.email, payload.code)
    return VerifyOtpResponse(user=user)
