"""Run the catalog API with uvicorn: ``python -m bookstore``."""

import uvicorn

from bookstore.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
