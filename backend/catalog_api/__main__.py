"""Run the API with uvicorn: python -m catalog_api"""

import uvicorn

from catalog_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("catalog_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
