"""Enumeraciones compartidas que describen las variantes de archivo soportadas."""

from __future__ import annotations

from enum import Enum


class GraymapFormat(str, Enum):
    """Variantes PBM/PGM reconocidas, indexadas por su token mágico."""

    ASCII_BITMAP = "P1"  # PBM texto: tokens 0/1
    ASCII_GRAYMAP = "P2"  # PGM texto: tokens 0..max_value
    BINARY_BITMAP = "P4"  # PBM binario: 8 píxeles por byte, MSB primero
    BINARY_GRAYMAP = "P5"  # PGM binario: un byte por píxel

    @classmethod
    def from_magic(cls, magic: str) -> "GraymapFormat | None":
        """Devuelve la variante para un token mágico exacto, o None."""
        for fmt in cls:
            if fmt.value == magic:
                return fmt
        return None

    @property
    def is_bitmap(self) -> bool:
        return self in (GraymapFormat.ASCII_BITMAP, GraymapFormat.BINARY_BITMAP)

    @property
    def is_binary(self) -> bool:
        return self in (GraymapFormat.BINARY_BITMAP, GraymapFormat.BINARY_GRAYMAP)
