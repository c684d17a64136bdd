"""Primitivas de lectura secuencial sobre un buffer de bytes.

Se comportan como un stream de texto/binario: una vez que una lectura falla
(fin de datos o token mal formado) el lector queda en estado `failed` y todas
las lecturas posteriores devuelven None sin consumir nada.
"""

from __future__ import annotations

from typing import Callable

# Mismo conjunto que isspace() en la locale "C"
WHITESPACE = frozenset(b" \t\n\v\f\r")
DIGITS = frozenset(b"0123456789")


def is_space(byte: int) -> bool:
    return byte in WHITESPACE


class ByteReader:
    """Cursor sobre `bytes` con peek, skip-while y extracción de tokens."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self.pos = 0
        self.failed = False

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self._data)

    def peek(self) -> int | None:
        """Devuelve el siguiente byte sin consumirlo, o None al final."""
        if self.failed or self.exhausted:
            return None
        return self._data[self.pos]

    def read_byte(self) -> int | None:
        if self.failed:
            return None
        if self.exhausted:
            self.failed = True
            return None
        value = self._data[self.pos]
        self.pos += 1
        return value

    def read_bytes(self, count: int) -> bytes:
        """Lee hasta `count` bytes; si no hay suficientes, marca el fallo."""
        if self.failed:
            return b""
        chunk = self._data[self.pos : self.pos + count]
        self.pos += len(chunk)
        if len(chunk) < count:
            self.failed = True
        return chunk

    def skip_while(self, predicate: Callable[[int], bool]) -> int:
        """Consume bytes mientras cumplan el predicado. Devuelve cuántos."""
        if self.failed:
            return 0
        start = self.pos
        while not self.exhausted and predicate(self._data[self.pos]):
            self.pos += 1
        return self.pos - start

    def skip_whitespace(self) -> int:
        return self.skip_while(is_space)

    def read_line(self) -> str | None:
        """Lee hasta el siguiente salto de línea (que se consume pero no se devuelve).

        Devuelve None si no queda nada que leer. La última línea sin `\\n`
        final se devuelve igualmente.
        """
        if self.failed:
            return None
        if self.exhausted:
            self.failed = True
            return None
        start = self.pos
        self.skip_while(lambda b: b != 0x0A)
        line = self._data[start : self.pos]
        if not self.exhausted:
            self.pos += 1  # el propio '\n'
        return line.decode("latin-1")

    def read_uint(self) -> int | None:
        """Extrae un entero sin signo en decimal precedido de espacios opcionales.

        Consume la secuencia más larga de dígitos ASCII. Si no hay ninguno, el
        lector pasa a `failed` y se devuelve None.
        """
        if self.failed:
            return None
        self.skip_whitespace()
        start = self.pos
        self.skip_while(lambda b: b in DIGITS)
        if self.pos == start:
            self.failed = True
            return None
        return int(self._data[start : self.pos])
