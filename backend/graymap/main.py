"""Punto de entrada de la API usando FastAPI.

Este módulo crea la aplicación, configura logging y CORS y registra los
routers. El decodificador se puede usar sin la API; esto solo expone sus
operaciones por HTTP.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from graymap.api.v1.images import router as images_router
from graymap.core.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Instancia principal de FastAPI; aquí es donde se montan rutas y middleware.
app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
)

# CORS configurable via `settings.allowed_origins` (definido en .env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(o) for o in settings.allowed_origins],
    allow_credentials=settings.allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    return {"status": "ok"}


app.include_router(images_router, prefix="/api/v1")
