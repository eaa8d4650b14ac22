# External package imports
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter(tags=["health"])


@router.get("/health", response_class=PlainTextResponse)
async def health() -> str:
    """Liveness probe"""
    return "OK"
