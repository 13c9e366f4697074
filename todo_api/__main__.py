"""Run the API with uvicorn: ``python -m todo_api``."""

import uvicorn

from todo_api.config import settings


def main() -> None:
    uvicorn.run(
        "todo_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
