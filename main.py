import logging
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from src.api.v1 import router as v1_router
from src.api.v1.endpoints import run_conversion
from src.utils.config import load_config

config = load_config()
logger = logging.getLogger(__name__)

# Initialize FastAPI app with metadata for Swagger UI
app = FastAPI(
    title="CSV to JSON Converter API",
    description="API for converting the CSV files of an input directory into JSON files.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create a background scheduler
scheduler = BackgroundScheduler()


def scheduled_conversion():
    try:
        logger.info("Running scheduled conversion task")
        result = run_conversion()
        logger.info(f"Scheduled conversion completed: {result.message}")
    except Exception as e:
        logger.error(f"Error in scheduled conversion: {str(e)}")


def start_scheduler(interval_minutes: int):
    scheduler.add_job(
        scheduled_conversion,
        trigger=IntervalTrigger(minutes=interval_minutes),
        id="scheduled_conversion",
        name=f"Run conversion every {interval_minutes} minutes",
        replace_existing=True
    )
    scheduler.start()
    logger.info(f"Scheduler started - Conversion will run every {interval_minutes} minutes")


@app.on_event("startup")
def on_startup():
    if config["CONVERT_INTERVAL_MINUTES"] > 0:
        start_scheduler(config["CONVERT_INTERVAL_MINUTES"])
    logger.info("FastAPI application started")


@app.on_event("shutdown")
def on_shutdown():
    if scheduler.running:
        scheduler.shutdown()
    logger.info("FastAPI application shutdown")


app.include_router(v1_router, prefix="/api/v1")

if __name__ == "__main__":
    """
    Run the FastAPI app using Uvicorn.
    """
    try:
        logger.info("Starting FastAPI server with Uvicorn")
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=8000,
            log_level="info",
            workers=1
        )
    except Exception as e:
        logger.error(f"Failed to start server: {str(e)}")
        raise
