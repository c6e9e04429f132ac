import logging

from fastapi import FastAPI

from app.core.error_handlers import register_error_handlers
from app.core.logging_middleware import LoggingMiddleware
from app.db.init_db import init_db
from app.routers.classwork import router as classwork_router
from app.routers.courses import router as courses_router

logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Classwork Reports")

# Middleware
app.add_middleware(LoggingMiddleware)

# Data errors -> JSON responses
register_error_handlers(app)


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


# Startup event
@app.on_event("startup")
def on_startup():
    init_db()


# Include routers
app.include_router(classwork_router, prefix="/students", tags=["classwork"])
app.include_router(courses_router, prefix="/courses", tags=["courses"])
