from fastapi import APIRouter

from app.api.endpoints.directory import campus, student

api_router = APIRouter(prefix="/api")
api_router.include_router(campus.router)
api_router.include_router(student.router)
