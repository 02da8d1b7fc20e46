"""
ASGI entry point for the FastAPI application.
"""

from main import app

# Export the app for ASGI servers
application = app

if __name__ == "__main__":
    import uvicorn
    from services.settings import settings
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
