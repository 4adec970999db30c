# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import APIRouter
from app.api.v1 import users
from app.api.v1 import health

"""
Roteador principal da API v1.


- Agrega e inclui sub-routers (users, health).
- Centraliza prefixos/tags; importado por `main.py` como `/api/v1`.
"""

router_v1 = APIRouter(tags=["v1"])

# Sub-rotas
router_v1.include_router(users.router,  prefix="/users",  tags=["users"])
router_v1.include_router(health.router, prefix="/health", tags=["Health"])
