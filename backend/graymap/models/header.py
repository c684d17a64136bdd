"""Modelo de la cabecera ya parseada de un archivo PBM/PGM."""

from __future__ import annotations

from pydantic import BaseModel

from graymap.core.enums import GraymapFormat


class GraymapHeader(BaseModel):
    """
    Campos compartidos por las cuatro variantes.
    """

    format: GraymapFormat
    width: int = 0
    height: int = 0
    max_value: int = 255
    comment: str | None = None  # única línea '#' tras el token mágico

    @property
    def pixel_count(self) -> int:
        return self.width * self.height
