"""Health (sin auth), salidas tipadas y estables."""
from fastapi import APIRouter, status

from app.api.schemas.health import PingOut, HealthOut
from app.infrastructure.db.mongo_async import ping as mongo_ping


router = APIRouter(tags=["Health"])


@router.get("/ping", response_model=PingOut, summary="Ping básico")
async def ping() -> PingOut:
    return PingOut(message="pong")


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthOut, summary="Salud básica")
async def health() -> HealthOut:
    return HealthOut(ok=True, db=await mongo_ping())
