"""Run the API with `python -m admin_api`."""
import uvicorn

from admin_api.core.config import get_settings


def main():
    settings = get_settings()

    uvicorn.run(
        "admin_api.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
