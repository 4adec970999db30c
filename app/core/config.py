# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import os
from dataclasses import dataclass
from dotenv import load_dotenv
from sqlalchemy.engine import URL

"""
Central de configurações (Settings) da Users API.


- Carrega variáveis do .env (app/env/log/db/sync).
- Monta a URL do banco (MySQL + driver async) a partir das partes ou usa DATABASE_URL.
- Expõe `settings` como singleton para uso em toda a app.
"""

load_dotenv()

def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")

@dataclass
class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "Users API")
    APP_ENV: str = os.getenv("APP_ENV", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "3000"))


    DB_DIALECT: str = os.getenv("DB_DIALECT", "mysql")
    DB_DRIVER: str = os.getenv("DB_DRIVER", "aiomysql")
    DB_HOST: str = os.getenv("DB_HOST", "127.0.0.1")
    DB_PORT: int = int(os.getenv("DB_PORT", "3306"))
    DB_USER: str = os.getenv("DB_USER", "root")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
    DB_NAME: str = os.getenv("DB_NAME", "users_demo")

    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    DB_POOL_TIMEOUT: int = int(os.getenv("DB_POOL_TIMEOUT", "30"))
    DB_ECHO: bool = _env_bool("DB_ECHO")

    DB_SYNC_MODE: str = os.getenv("DB_SYNC_MODE", "alter")

    @property
    def database_url(self) -> str:
        """
        URL efetiva do banco. `DATABASE_URL` tem precedência sobre as partes DB_*.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = URL.create(
            drivername=f"{self.DB_DIALECT}+{self.DB_DRIVER}",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )
        return url.render_as_string(hide_password=False)

settings = Settings()
