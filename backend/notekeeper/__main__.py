"""
Run the server: python -m notekeeper
"""
import uvicorn

from .config import settings


def main() -> None:
    uvicorn.run(
        "notekeeper.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
