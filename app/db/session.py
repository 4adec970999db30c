# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from app.core.config import settings

"""
Sessão assíncrona do MySQL via SQLAlchemy 2.0.


- Cria `engine` async com pool (pool_size, max_overflow, timeout, pre-ping).
- Garante URL com driver assíncrono (ex: `mysql+aiomysql://`).
- Expõe `SessionLocal` (async_sessionmaker) para injeção via deps.
"""

_url = make_url(settings.database_url)
if "+" not in _url.drivername:
    raise RuntimeError(
        "A URL do banco deve indicar um driver assíncrono (ex: 'mysql+aiomysql://')."
    )

engine = create_async_engine(
    _url,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
    pool_timeout=settings.DB_POOL_TIMEOUT,
    pool_pre_ping=True,
    echo=settings.DB_ECHO,
)

SessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)
