from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/api/health")
async def health_check() -> Dict[str, str]:
    return {"status": "ok"}
