"""Run the gateway with uvicorn: ``python -m movie_gateway``."""

import uvicorn

from movie_gateway.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("movie_gateway.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
