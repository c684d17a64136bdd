"""Carga de configuración de la aplicación.

Usa `pydantic-settings` para leer valores desde `.env` o variables de
entorno. Los comentarios aclaran para qué sirve cada campo de forma que
resulte legible para personas sin contexto previo.
"""

from functools import lru_cache
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Contenedor tipado para todas las opciones configurables."""

    app_name: str = "Graymap API"
    environment: str = "development"
    log_level: str = "INFO"

    # Si es True, quedarse sin datos de píxel hace fallar la carga.
    # Por defecto se imita el comportamiento histórico: se rellena con ceros.
    strict_truncation: bool = False

    # P1/P4 consumen también el campo max_value de la cabecera (compatibilidad
    # con lectores antiguos). Ponerlo a False para el layout Netpbm estándar.
    read_bitmap_max_value: bool = True

    # Límites para no reservar buffers absurdos con cabeceras corruptas
    max_pixel_count: int = 64 * 1024 * 1024
    max_upload_bytes: int = 64 * 1024 * 1024

    # CORS. `NoDecode` evita que el valor del entorno se lea como JSON,
    # así `ALLOWED_ORIGINS=http://a,http://b` llega como cadena al validador.
    allowed_origins: Annotated[list[str], NoDecode] = ["*"]
    allow_credentials: bool = False

    # Le indicamos a Pydantic que lea automáticamente las variables de entorno
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def split_origins(cls, value: Any) -> Any:
        """Acepta una lista o una cadena separada por comas."""
        if isinstance(value, str):
            return [s.strip() for s in value.split(",") if s.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Crea (y memoriza) la configuración de forma perezosa.

    Usamos `lru_cache` para que sólo se construya una instancia por proceso,
    evitando relecturas repetidas de `.env`.
    """

    return Settings()
