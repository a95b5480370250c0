"""
Run the API under uvicorn.

Usage:
    python -m blog_api

Host, port and log level come from the same settings as the app
(HOST, PORT, LOG_LEVEL environment variables or `.env`).
"""
import uvicorn

from blog_api.config import get_settings


def main() -> None:
    """Serve the FastAPI application."""
    settings = get_settings()
    uvicorn.run(
        "blog_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
