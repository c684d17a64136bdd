"""Errores del decodificador PBM/PGM.

Todos heredan de `ValueError` para que el código que ya captura errores de
validación genéricos siga funcionando. `GraymapImage.load_image` los captura
y los reduce a un booleano.
"""


class GraymapError(ValueError):
    """Base para cualquier fallo reconocido al decodificar un archivo."""


class UnsupportedFormatError(GraymapError):
    """El token mágico no es P1, P2, P4 ni P5."""

    def __init__(self, magic: str) -> None:
        super().__init__(f"Unsupported magic token: {magic!r}")
        self.magic = magic


class UnsupportedDepthError(GraymapError):
    """max_value por encima de 255 (no hay soporte de 16 bits)."""

    def __init__(self, max_value: int) -> None:
        super().__init__(f"Unsupported max value {max_value} (only 8-bit samples)")
        self.max_value = max_value


class ImageTooLargeError(GraymapError):
    def __init__(self, width: int, height: int, limit: int) -> None:
        super().__init__(
            f"Image {width}x{height} exceeds the pixel limit of {limit}"
        )
        self.width = width
        self.height = height
        self.limit = limit


class TruncatedDataError(GraymapError):
    """Los datos de píxel se acabaron antes de llenar el buffer (modo estricto)."""

    def __init__(self, filled: int, expected: int) -> None:
        super().__init__(f"Pixel data truncated: got {filled} of {expected} samples")
        self.filled = filled
        self.expected = expected
