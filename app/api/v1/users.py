# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.deps import get_db
from app.db.models import User
import logging

"""
CRUD de usuários (tabela `user`).


- `POST /users` cria; `GET /users` lista tudo (sem paginação/filtro).
- `GET|PUT|DELETE /users/{user_id}` operam sobre um usuário; 404 quando não existe.
- Qualquer erro do banco (unicidade, conexão...) é logado e vira 500.
"""

log = logging.getLogger("users")

router = APIRouter()

# Schemas UserCreateIn/UserUpdateIn/UserOut
class UserCreateIn(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: Optional[str] = Field(None, max_length=255, description="Gravada como recebida (sem hash)")
    age: Optional[int] = Field(None, description="Default 22 quando omitido")

    model_config = {
        "json_schema_extra": {
            "example": {"username": "alice", "password": "s3cret", "age": 30}
        }
    }

class UserUpdateIn(BaseModel):
    username: Optional[str] = Field(None, min_length=1, max_length=255)
    age: Optional[int] = None

    model_config = {
        "json_schema_extra": {
            "example": {"username": "alice.b", "age": 31}
        }
    }

class UserOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    username: str
    password: Optional[str] = None
    age: Optional[int] = None

class MessageOut(BaseModel):
    message: str


async def _get_or_404(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


async def _fail(db: AsyncSession, action: str, exc: SQLAlchemyError) -> HTTPException:
    await db.rollback()
    log.error("Failed to %s user: %s", action, exc)
    return HTTPException(status_code=500, detail=f"Failed to {action} user")


@router.post("", response_model=UserOut, summary="Criar usuário")
async def create_user(
    payload: UserCreateIn,
    db: AsyncSession = Depends(get_db),
) -> User:
    user = User(**payload.model_dump(exclude_none=True))
    db.add(user)
    try:
        await db.commit()
        await db.refresh(user)
    except SQLAlchemyError as e:
        raise await _fail(db, "create", e)
    log.info("User %s created (id=%s)", user.username, user.id)
    return user


@router.get("", response_model=List[UserOut], summary="Listar usuários")
async def list_users(db: AsyncSession = Depends(get_db)) -> List[User]:
    try:
        result = await db.execute(select(User).order_by(User.id))
    except SQLAlchemyError as e:
        raise await _fail(db, "list", e)
    return list(result.scalars().all())


@router.get("/{user_id}", response_model=UserOut, summary="Detalhar usuário por id")
async def get_user(
    user_id: int = Path(..., description="Id do usuário"),
    db: AsyncSession = Depends(get_db),
) -> User:
    try:
        return await _get_or_404(db, user_id)
    except SQLAlchemyError as e:
        raise await _fail(db, "fetch", e)


@router.put("/{user_id}", response_model=UserOut, summary="Atualizar username/age")
async def update_user(
    payload: UserUpdateIn,
    user_id: int = Path(..., description="Id do usuário"),
    db: AsyncSession = Depends(get_db),
) -> User:
    try:
        user = await _get_or_404(db, user_id)
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(user, field, value)
        await db.commit()
        await db.refresh(user)
    except SQLAlchemyError as e:
        raise await _fail(db, "update", e)
    return user


@router.delete("/{user_id}", response_model=MessageOut, summary="Remover usuário")
async def delete_user(
    user_id: int = Path(..., description="Id do usuário"),
    db: AsyncSession = Depends(get_db),
) -> dict[str, str]:
    try:
        user = await _get_or_404(db, user_id)
        await db.delete(user)
        await db.commit()
    except SQLAlchemyError as e:
        raise await _fail(db, "delete", e)
    log.info("User %s deleted", user_id)
    return {"message": "User deleted"}
