"""Servicio simple en memoria para gestionar imágenes decodificadas.

Esta clase actúa como una pequeña capa de persistencia: decodifica lo que
llega por la API y guarda el resultado en un diccionario por id.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional
from uuid import uuid4

from graymap.models.image import GraymapImage
from graymap.models.record import ImageRecord
from graymap.services.decoder_service import DecoderService


class ImageService:
    """
    Gestión de imágenes subidas. MVP: almacenamiento en memoria.
    """

    def __init__(self, decoder: DecoderService | None = None) -> None:
        self._images: Dict[str, ImageRecord] = {}
        self._decoder = decoder
        self.logger = logging.getLogger(__name__)

    @property
    def decoder(self) -> DecoderService:
        # Perezoso para que los tests puedan cambiar la configuración antes
        if self._decoder is None:
            self._decoder = DecoderService()
        return self._decoder

    def create_image(self, filename: str, data: bytes) -> Optional[ImageRecord]:
        """Decodifica `data` y lo guarda. Devuelve None si la carga falla."""
        image = GraymapImage()
        if not image.load_bytes(data, decoder=self.decoder):
            return None

        record = ImageRecord(
            id=str(uuid4()),
            filename=filename,
            image=image,
            size_bytes=len(data),
        )
        self._images[record.id] = record
        self.logger.info(
            "Stored %s as %s (%dx%d)", filename, record.id, image.width, image.height
        )
        return record

    def get_image(self, image_id: str) -> Optional[ImageRecord]:
        """Devuelve un registro por id o None si no existe."""
        return self._images.get(image_id)

    def delete_image(self, image_id: str) -> bool:
        return self._images.pop(image_id, None) is not None

    def list_images(self) -> List[ImageRecord]:
        """Listado sencillo, en orden de subida."""
        return list(self._images.values())
