"""Проверка живости сервиса."""

from fastapi import APIRouter

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health():
    """Сервис запущен, GitHub не опрашивается."""
    return {"status": "ok"}
