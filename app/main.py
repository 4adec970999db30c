# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from app.core.config import settings
from app.api.v1.router import router_v1
from app.db.session import engine
from app.db.sync import sync_schema

"""
Users API – FastAPI entrypoint.

- Configura logging conforme settings.LOG_LEVEL.
- No startup: testa a conexão e sincroniza o schema (DB_SYNC_MODE); falhas são logadas, não derrubam o app.
- Monta /api/v1 e expõe /health para diagnóstico rápido do ambiente.
"""

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("app")


async def _check_connection() -> bool:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        log.error("Database connection failed: %s", e)
        return False
    log.info("Database connected")
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    if await _check_connection():
        try:
            await sync_schema(engine, settings.DB_SYNC_MODE)
            log.info("Model synchronized")
        except (SQLAlchemyError, ValueError) as e:
            log.error("Model sync failed: %s", e)
    yield
    await engine.dispose()


start_server = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

start_server.include_router(router_v1, prefix="/api/v1")

@start_server.get("/health", tags=["Health"])
def health():
    return {"status": "ok", "env": settings.APP_ENV}
