from fastapi import APIRouter
from app.api.api_v1.endpoints import auth, cases, clients, health, tasks, templates

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(cases.router, prefix="/cases", tags=["cases"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
