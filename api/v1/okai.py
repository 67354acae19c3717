from fastapi import APIRouter
from apps.okai.routes import chat, videos, tools, health

router = APIRouter()

# Include health and dashboard routes
router.include_router(health.router, prefix="", tags=["Health"])

# Include chat routes
router.include_router(chat.router, prefix="", tags=["Chat"])

# Include video lifecycle routes
router.include_router(videos.router, prefix="", tags=["Videos"])

# Include document, image, quiz, search and activity routes
router.include_router(tools.router, prefix="", tags=["Tools"])
