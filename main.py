# main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from api.router import router as api_router
from apps.okai.config import get_okai_settings
from apps.okai.db import init_okai_db, close_okai_db
from apps.okai.exceptions import OkaiError
from common.utils.log_config import configure_logging

# Get settings
settings = get_okai_settings()

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="OKAIgpt API", version="1.0.0")

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


@app.exception_handler(OkaiError)
async def okai_error_handler(request: Request, exc: OkaiError):
    """Report store errors as JSON with a machine-readable error code"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.code}
    )


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup"""
    await init_okai_db()
    logger.info("OKAIgpt API started")


@app.on_event("shutdown")
async def shutdown_event():
    """Release pooled database connections"""
    await close_okai_db()


app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT)
