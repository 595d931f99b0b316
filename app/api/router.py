"""Agregador de routers de la API."""
from fastapi import APIRouter
from app.api.routers import auth, folders, health, notes, tags, users

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(users.router)
api_router.include_router(auth.router)
api_router.include_router(folders.router)
api_router.include_router(tags.router)
api_router.include_router(notes.router)
