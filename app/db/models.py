# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from typing import Optional
from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.base import Base

"""
Modelos ORM.


- `User` mapeia a tabela `user` (nome fixo, sem colunas de timestamp).
- `age` tem default 22 no ORM e como DEFAULT da coluna.
"""

DEFAULT_AGE = 22

class User(Base):
    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    age: Mapped[Optional[int]] = mapped_column(
        Integer, default=DEFAULT_AGE, server_default=text(str(DEFAULT_AGE))
    )

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r})"
