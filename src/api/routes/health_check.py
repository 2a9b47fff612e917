from fastapi import APIRouter, Depends

from src.app.services.timer_registry import TimerRegistry
from src.depends import get_timer_registry

router = APIRouter()


@router.get("/health")
async def health_check(registry: TimerRegistry = Depends(get_timer_registry)):
    return {"status": "ok", "active_countdowns": len(registry)}
