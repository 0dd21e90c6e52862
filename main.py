"""Convenience entry point for running the FastAPI application."""

if __name__ == "__main__":
    import uvicorn

    from medbill.core.config import settings

    uvicorn.run(
        "medbill.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
