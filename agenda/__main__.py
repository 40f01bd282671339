"""Arranque del servidor: ``python -m agenda``.

Start uvicorn on the configured host and port (PORT, default 3000).
"""

import logging

import uvicorn

from agenda.config import settings

logger = logging.getLogger("agenda")


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Iniciando servidor en http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run("agenda.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
