from fastapi import APIRouter
from firmdesk.api.routers import clients, tasks, assignees, todos, imports, diagnostics

api_router = APIRouter()
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(assignees.router, prefix="/assignees", tags=["assignees"])
api_router.include_router(todos.router, prefix="/todos", tags=["todos"])
api_router.include_router(imports.router, prefix="/imports", tags=["imports"])
api_router.include_router(diagnostics.router, prefix="/diagnostics", tags=["diagnostics"])
