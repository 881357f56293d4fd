"""Router principal do Discord — agrega os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.discord.event import router as event_router

router = APIRouter()

router.include_router(event_router)
