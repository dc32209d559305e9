from fintrack.logging.logger import configure, logger
from fintrack.main import create_app
from fintrack.services.deps import get_settings_service


if __name__ == "__main__":
    import uvicorn

    settings = get_settings_service().settings
    configure(settings.log_level, settings.log_file)
    app = create_app()
    logger.info(f"Serving fintrack ({settings.environment}) on {settings.host}:{settings.port}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="error",
        reload=False,
        loop="asyncio",
    )
