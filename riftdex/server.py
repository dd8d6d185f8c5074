"""Run the API with uvicorn on the configured host and port."""

import logging

import uvicorn

from riftdex.config import settings


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run("riftdex.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
