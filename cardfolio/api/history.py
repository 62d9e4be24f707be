"""
CardFolio — Audit history routes (append-only: no update, no delete)
"""
from fastapi import APIRouter, Depends

from cardfolio.core.security import generate_id, utcnow
from cardfolio.db.database import Database, get_db
from cardfolio.schemas.base import SuccessResponse
from cardfolio.schemas.resources import HistoryIn

router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("")
async def list_history(db: Database = Depends(get_db)):
    return await db.fetch_all("SELECT * FROM history ORDER BY timestamp DESC")


@router.post("", response_model=SuccessResponse, response_model_exclude_none=True)
async def record_history(payload: HistoryIn, db: Database = Depends(get_db)):
    entry_id = generate_id()
    await db.execute(
        "INSERT INTO history (id, user_email, user_role, action, details, timestamp) "
        "VALUES (:id, :user_email, :user_role, :action, :details, :now)",
        {
            "id": entry_id,
            "user_email": payload.user_email,
            "user_role": payload.user_role,
            "action": payload.action,
            "details": payload.details,
            "now": utcnow(),
        },
    )
    return SuccessResponse(id=entry_id)
