#run it with uvicorn contactform.main:app --reload
from fastapi import FastAPI
from contactform.api.api_router import api_router
from contactform.core.config import get_settings
from dotenv import load_dotenv
import logging

# Load environment variables from .env file
load_dotenv()

settings = get_settings()

# Set up logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(title=settings.app_name, version=settings.app_version)

app.include_router(api_router)


@app.get("/api/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
    }
