"""Run the outfit catalog server locally."""

import uvicorn

from catalog_app.config import AppConfig


def main() -> None:
    config = AppConfig.from_env()
    uvicorn.run("server.api:app", host="0.0.0.0", port=config.port, reload=False)


if __name__ == "__main__":
    main()
