from fastapi import APIRouter
from todoapp.api.routes import auth_router, health_router, todos_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(todos_router)
