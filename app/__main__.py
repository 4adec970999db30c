# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import logging
import uvicorn
from app.core.config import settings
from app.main import start_server

"""
Execução local: `python -m app` sobe o uvicorn em HOST:PORT.
"""

log = logging.getLogger("app")

def main() -> None:
    log.info("Starting server on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(start_server, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    main()
