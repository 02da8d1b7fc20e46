import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api import status as status_api
from services.settings import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Status Dashboard API",
    description="30-day uptime history of every configured service, built from health-check logs.",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def startup_event():
    """
    Logs where the dashboard reads its configuration and logs from.
    """
    logger.info(
        "Status dashboard starting: config=%s logs=%s timezone=%s",
        settings.config_source, settings.log_source, settings.timezone_name,
    )

app.include_router(status_api.router, prefix="/api")

@app.get("/", tags=["Root"])
def read_root():
    """
    Root endpoint to check if the API is running.
    """
    return {"status": "ok", "message": "Welcome to the Status Dashboard API"}

@app.get("/health")
def health_check():
    """
    Health check endpoint for deployment monitoring
    """
    return {"status": "healthy", "service": "status-dashboard"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
