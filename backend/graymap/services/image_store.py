"""Almacén global de imágenes en memoria.

No hay base de datos, así que exponemos una instancia única de
`ImageService` que vive mientras el proceso está en marcha. Esto simplifica el
uso en los routers sin requerir inyección de dependencias.
"""

from graymap.services.image_service import ImageService

# Instancia global única para toda la app
image_service = ImageService()
