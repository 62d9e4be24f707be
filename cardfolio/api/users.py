"""
CardFolio — User administration routes
"""
from fastapi import APIRouter, Depends

from cardfolio.core.security import generate_id, hash_password
from cardfolio.db.database import Database, get_db
from cardfolio.schemas.base import SuccessResponse
from cardfolio.schemas.resources import UserIn

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(db: Database = Depends(get_db)):
    """Passwords and pending one-time codes are never listed."""
    return await db.fetch_all("SELECT id, email, role, created_at FROM users")


@router.post("", response_model=SuccessResponse, response_model_exclude_none=True)
async def create_user(payload: UserIn, db: Database = Depends(get_db)):
    user_id = generate_id()
    password = hash_password(payload.password) if payload.password is not None else None
    await db.execute(
        "INSERT INTO users (id, email, password, role) VALUES (:id, :email, :password, :role)",
        {"id": user_id, "email": payload.email, "password": password, "role": payload.role},
    )
    return SuccessResponse(id=user_id)


@router.delete("/{user_id}", response_model=SuccessResponse, response_model_exclude_none=True)
async def delete_user(user_id: str, db: Database = Depends(get_db)):
    await db.execute("DELETE FROM users WHERE id = :id", {"id": user_id})
    return SuccessResponse()
