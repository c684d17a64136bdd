"""Decodificador de archivos PBM (P1/P4) y PGM (P2/P5).

El flujo replica el de un lector clásico basado en streams: token mágico,
comentario opcional, dimensiones, max_value y después el algoritmo de la
variante concreta escribe directamente en el buffer de la imagen.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Dict

from graymap.core.config import Settings, get_settings
from graymap.core.enums import GraymapFormat
from graymap.core.errors import (
    GraymapError,
    ImageTooLargeError,
    TruncatedDataError,
    UnsupportedDepthError,
    UnsupportedFormatError,
)
from graymap.models.header import GraymapHeader
from graymap.services.byte_reader import ByteReader

if TYPE_CHECKING:
    from graymap.models.image import GraymapImage


# Sin soporte de 16 bits por muestra
MAX_SUPPORTED_VALUE = 255

PixelDecoder = Callable[[ByteReader, bytearray, int, int], int]


class DecoderService:
    """
    Convierte los bytes de un archivo PBM/PGM en el buffer de un GraymapImage.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.logger = logging.getLogger(__name__)
        self._decoders: Dict[GraymapFormat, PixelDecoder] = {
            GraymapFormat.ASCII_BITMAP: self._decode_ascii_bitmap,
            GraymapFormat.ASCII_GRAYMAP: self._decode_ascii_graymap,
            GraymapFormat.BINARY_BITMAP: self._decode_binary_bitmap,
            GraymapFormat.BINARY_GRAYMAP: self._decode_binary_graymap,
        }

    # ---------- CABECERA ----------

    def _read_format(self, reader: ByteReader) -> GraymapFormat:
        magic = reader.read_line()
        fmt = GraymapFormat.from_magic(magic) if magic is not None else None
        if fmt is None:
            raise UnsupportedFormatError(magic or "")
        return fmt

    def _read_comment(self, reader: ByteReader) -> str | None:
        # Solo se reconoce un comentario, y solo justo después del token mágico
        if reader.peek() != ord("#"):
            return None
        line = reader.read_line() or ""
        return line[1:].strip()

    def _read_dimensions(self, reader: ByteReader) -> tuple[int, int]:
        width = reader.read_uint()
        height = reader.read_uint()
        return width or 0, height or 0

    def _check_size(self, width: int, height: int) -> None:
        limit = self.settings.max_pixel_count
        if width * height > limit:
            raise ImageTooLargeError(width, height, limit)

    def _read_max_value(
        self, reader: ByteReader, fmt: GraymapFormat, current: int
    ) -> int:
        """
        Lee max_value. Por compatibilidad también se consume en P1/P4 salvo
        que `read_bitmap_max_value` esté desactivado. Si el token falta se
        conserva el valor actual.
        """
        if fmt.is_bitmap and not self.settings.read_bitmap_max_value:
            return current

        value = reader.read_uint()
        if value is None:
            # Un token no numérico no pone max_value a 0: se conserva el
            # valor actual para que la imagen nunca anuncie un máximo nulo.
            return current
        if value > MAX_SUPPORTED_VALUE:
            raise UnsupportedDepthError(value)
        return value

    def parse_header(self, data: bytes) -> GraymapHeader:
        """
        Parsea solo la cabecera, sin tocar ninguna imagen.

        Raises:
            UnsupportedFormatError, UnsupportedDepthError, ImageTooLargeError
        """
        reader = ByteReader(data)
        fmt = self._read_format(reader)
        comment = self._read_comment(reader)
        width, height = self._read_dimensions(reader)
        self._check_size(width, height)
        max_value = self._read_max_value(reader, fmt, MAX_SUPPORTED_VALUE)
        return GraymapHeader(
            format=fmt,
            width=width,
            height=height,
            max_value=max_value,
            comment=comment,
        )

    # ---------- DECODIFICACIÓN ----------

    def decode_into(self, image: "GraymapImage", data: bytes) -> None:
        """
        Rellena `image` a partir de `data`.

        No hay rollback: si max_value no es válido, la imagen ya tiene
        dimensiones y buffer asignados. Si el formato no se reconoce, la
        imagen no se modifica.
        """
        reader = ByteReader(data)
        fmt = self._read_format(reader)
        comment = self._read_comment(reader)
        width, height = self._read_dimensions(reader)
        self._check_size(width, height)

        image.format = fmt
        image.comment = comment
        image.width = width
        image.height = height
        image.pixels = bytearray(width * height)
        image.truncated = False

        if width == 0 or height == 0:
            self.logger.warning("Header declares an empty image (%dx%d)", width, height)

        image.max_value = self._read_max_value(reader, fmt, image.max_value)

        expected = width * height
        filled = self._decoders[fmt](reader, image.pixels, width, height)

        if filled < expected:
            image.truncated = True
            self.logger.warning(
                "%s pixel data truncated: %d of %d samples", fmt.value, filled, expected
            )
            if self.settings.strict_truncation:
                raise TruncatedDataError(filled, expected)

    def _decode_ascii_bitmap(
        self, reader: ByteReader, pixels: bytearray, width: int, height: int
    ) -> int:
        """P1: un token 0/1 por píxel, escalado a 0/255."""
        filled = 0
        for j in range(height):
            for i in range(width):
                value = reader.read_uint()
                if value is None:
                    return filled
                pixels[i + j * width] = 255 if value else 0
                filled += 1
        return filled

    def _decode_ascii_graymap(
        self, reader: ByteReader, pixels: bytearray, width: int, height: int
    ) -> int:
        """P2: un token por píxel, guardado tal cual (sin reescalar por max_value)."""
        filled = 0
        for j in range(height):
            for i in range(width):
                value = reader.read_uint()
                if value is None:
                    return filled
                pixels[i + j * width] = min(value, 255)
                filled += 1
        return filled

    def _decode_binary_bitmap(
        self, reader: ByteReader, pixels: bytearray, width: int, height: int
    ) -> int:
        """P4: 8 píxeles por byte, el bit alto es el primer píxel del grupo."""
        reader.skip_whitespace()

        filled = 0
        for j in range(height):
            for i in range(0, width, 8):
                packed = reader.read_byte()
                if packed is None:
                    return filled
                # El último grupo de la fila puede estar incompleto (padding)
                for k in range(min(8, width - i)):
                    shift = 7 - k
                    pixels[i + k + j * width] = ((packed >> shift) & 0x1) * 255
                    filled += 1
        return filled

    def _decode_binary_graymap(
        self, reader: ByteReader, pixels: bytearray, width: int, height: int
    ) -> int:
        """P5: un byte crudo por píxel."""
        reader.skip_whitespace()

        chunk = reader.read_bytes(width * height)
        pixels[: len(chunk)] = chunk
        return len(chunk)

    # ---------- PUNTOS DE ENTRADA ----------

    def load_bytes(self, image: "GraymapImage", data: bytes) -> bool:
        """Decodifica `data` en `image`. Devuelve False ante cualquier GraymapError."""
        try:
            self.decode_into(image, data)
        except GraymapError as exc:
            self.logger.warning("Failed to load graymap: %s", exc)
            return False

        self.logger.debug(
            "Loaded %s image %dx%d (max_value=%d)",
            image.format.value if image.format else "?",
            image.width,
            image.height,
            image.max_value,
        )
        return True

    def load_image(self, image: "GraymapImage", path: str | Path) -> bool:
        """
        Abre el archivo, lo decodifica en `image` y lo cierra siempre.
        Un archivo que no se puede leer cuenta como formato no reconocido.
        """
        path = Path(path)
        try:
            with open(path, "rb") as fh:
                data = fh.read()
        except OSError as exc:
            self.logger.warning("Could not read %s: %s", path, exc)
            return False

        return self.load_bytes(image, data)
