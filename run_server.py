#!/usr/bin/env python3
import logging
import os

import uvicorn

from app.core.config import settings
from app.core.logging import setup_logging


setup_logging()
logger = logging.getLogger("run_server")


def get_ssl_params() -> dict:
    key = settings.SSL_KEYFILE
    cert = settings.SSL_CERTFILE
    if not (key and cert and os.path.exists(key) and os.path.exists(cert)):
        logger.warning("Iniciando en HTTP (sin certificados SSL encontrados).")
        return {}
    logger.info("Usando certificados SSL para HTTPS.")
    return {"ssl_keyfile": key, "ssl_certfile": cert}


def main() -> None:
    params = get_ssl_params()
    protocolo = "https" if params else "http"

    logger.info(f"Servidor iniciado en {protocolo}://localhost:{settings.PORT}")
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
        **params,
    )


if __name__ == "__main__":
    main()
