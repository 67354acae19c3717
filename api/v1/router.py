# api/v1/router.py
from fastapi import APIRouter
from api.v1.okai import router as okai_router

router = APIRouter()

# Mount tool-based or domain-based routers
router.include_router(okai_router, prefix="/okai")
