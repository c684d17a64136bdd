"""Registro de una imagen subida a la API.

Se almacena en memoria junto con la `GraymapImage` ya decodificada, así que
cada consulta de píxel no vuelve a leer el archivo.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from graymap.models.image import GraymapImage


class ImageRecord(BaseModel):
    """Imagen decodificada más los datos de la subida."""

    id: str
    filename: str  # Nombre original del archivo subido
    image: GraymapImage
    size_bytes: Optional[int] = None  # Tamaño de la subida

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def summary(self) -> dict:
        """Campos que devuelven los endpoints; no incluye los píxeles."""
        image = self.image
        return {
            "image_id": self.id,
            "filename": self.filename,
            "format": image.format.value if image.format else None,
            "width": image.width,
            "height": image.height,
            "max_value": image.max_value,
            "comment": image.comment,
            "truncated": image.truncated,
            "initialized": image.is_initialized(),
            "size_bytes": self.size_bytes,
            "created_at": self.created_at.isoformat(),
        }
