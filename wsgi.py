"""
ASGI entry point for deployment
"""
from storefront.main import app

application = app

# For local testing
if __name__ == "__main__":
    import uvicorn
    from storefront.config import settings
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level="info" if not settings.DEBUG else "debug"
    )
