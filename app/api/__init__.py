"""Application API routers."""

from fastapi import APIRouter
from .routes.advocates import router as advocates_router

router = APIRouter()
router.include_router(advocates_router)

__all__ = ["router"]
