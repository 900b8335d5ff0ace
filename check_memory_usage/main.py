from fastapi import FastAPI

from .api import health, memory

app = FastAPI(title="Memory Usage Check")

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(memory.router, prefix="/memory", tags=["memory"])
