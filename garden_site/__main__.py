"""Run the API with uvicorn: ``python -m garden_site``."""
import uvicorn

from garden_site.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("garden_site.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
