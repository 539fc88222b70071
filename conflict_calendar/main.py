# conflict_calendar/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from conflict_calendar.config import settings
from conflict_calendar.routers import schedule

import time
import logging
from fastapi import Request
from conflict_calendar.logging_config import setup_logging


setup_logging()
logger = logging.getLogger("conflict_calendar")


app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
        ms = int((time.time() - start) * 1000)
        logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code, ms)
        return response
    except Exception:
        ms = int((time.time() - start) * 1000)
        logger.exception("Unhandled error %s %s (%dms)", request.method, request.url.path, ms)
        raise


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(schedule.router)

@app.get("/")
def root():
    return {"message": "Conflict calendar is running!"}
