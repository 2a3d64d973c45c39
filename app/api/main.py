"""API router setup."""
from fastapi import APIRouter

from app.api.routes import students, teachers

api_router = APIRouter()
api_router.include_router(students.router)
api_router.include_router(teachers.router)
