"""Modelo en memoria de una imagen en escala de grises de 8 bits.

La instancia se crea vacía y `load_image` intenta poblarla de una sola vez.
Los campos se documentan para que quede claro qué se conserva tras una carga
fallida (no hay rollback: las dimensiones pueden quedar asignadas).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field

from graymap.core.enums import GraymapFormat
from graymap.services.decoder_service import DecoderService


class GraymapImage(BaseModel):
    """Buffer de píxeles row-major (índice = x + y * width), muestras 0..255."""

    width: int = 0  # 0 hasta una carga correcta
    height: int = 0
    max_value: int = 255  # Valor nominal máximo; nunca > 255
    pixels: bytearray = Field(default_factory=bytearray)

    format: Optional[GraymapFormat] = None  # Variante de la última carga
    comment: Optional[str] = None  # Línea '#' opcional de la cabecera
    truncated: bool = False  # True si faltaban datos de píxel

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def load_image(self, path: str | Path, decoder: DecoderService | None = None) -> bool:
        """Carga un archivo PBM/PGM. Devuelve False si no se reconoce o falla."""
        return (decoder or DecoderService()).load_image(self, path)

    def load_bytes(self, data: bytes, decoder: DecoderService | None = None) -> bool:
        """Igual que `load_image` pero desde un buffer ya leído en memoria."""
        return (decoder or DecoderService()).load_bytes(self, data)

    def is_initialized(self) -> bool:
        return self.width != 0 and self.height != 0 and len(self.pixels) > 0

    def get_width(self) -> int:
        return self.width

    def get_height(self) -> int:
        return self.height

    def get_max_value(self) -> int:
        return self.max_value

    def get_pixel(self, x: int, y: int) -> int:
        """
        Devuelve la muestra en (x, y).

        Solo se valida el índice lineal: una `x` mayor que el ancho cae en la
        fila siguiente mientras el índice siga dentro del buffer.

        Raises:
            IndexError: si el índice lineal queda fuera del buffer.
        """
        index = y * self.width + x
        if index < 0 or index >= len(self.pixels):
            raise IndexError(
                f"Pixel ({x}, {y}) out of range for {self.width}x{self.height} image"
            )
        return self.pixels[index]

    def to_pil(self) -> Image.Image:
        """Copia los píxeles a una imagen Pillow en modo "L"."""
        if not self.is_initialized():
            raise ValueError("Image is not initialized")
        return Image.frombytes("L", (self.width, self.height), bytes(self.pixels))
