# api/router.py
from fastapi import APIRouter
from api.v1.router import router as v1_router

router = APIRouter()

# Mount v1 APIs
router.include_router(v1_router, prefix="/api/v1")


@router.get("/", include_in_schema=False)
async def root():
    """Root endpoint listing the API entry points"""
    return {
        "message": "OKAIgpt API is running",
        "endpoints": ["/api/v1/okai/health", "/api/v1/okai/chat/sessions", "/docs"]
    }
