"""Entry point for serving the Blog API.

Runs the FastAPI application under uvicorn.  Host and port come from
``HOST`` and ``PORT`` (see ``blog_api.app.core.config``); all other
configuration such as ``DATABASE_URL`` and ``LOG_LEVEL`` is read from
the environment as well.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from blog_api.app.core.config import settings
from blog_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
