# trainer_calendar/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import logging
import os

#Import Routers
from trainer_calendar.api.v1 import calendar

# Load environment variables
load_dotenv()

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="Trainer Calendar API",
    description="Resolved availability calendars for corporate trainers",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
#Include routers
app.include_router(calendar.router, prefix="/api/v1", tags=["calendar"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Trainer Calendar API",
        "version": "1.0.0",
        "status": "running"
    }

@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "environment": os.getenv("APP_ENV", "unknown")
    }
