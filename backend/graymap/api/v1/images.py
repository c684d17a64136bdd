from __future__ import annotations

from fastapi import APIRouter, File, HTTPException, Response, UploadFile, status

from graymap.core.config import get_settings
from graymap.models.record import ImageRecord
from graymap.services.image_store import image_service

router = APIRouter(prefix="/images", tags=["images"])

settings = get_settings()


def get_record_or_404(image_id: str) -> ImageRecord:
    """
    Busca la imagen por id; si no existe responde 404.
    """
    record = image_service.get_image(image_id)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Image not found.",
        )
    return record


@router.post(
    "",
    summary="Upload a PBM/PGM file and decode it",
    status_code=status.HTTP_201_CREATED,
)
async def upload_image(file: UploadFile = File(...)) -> dict:
    file_bytes = await file.read()
    if not file_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file is empty.",
        )

    if len(file_bytes) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Uploaded file exceeds {settings.max_upload_bytes} bytes.",
        )

    record = image_service.create_image(file.filename or "upload", file_bytes)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="File is not a supported PBM/PGM image.",
        )

    return record.summary()


@router.get("", summary="List decoded images")
async def list_images() -> list[dict]:
    return [record.summary() for record in image_service.list_images()]


@router.get("/{image_id}", summary="Get image metadata")
async def get_image(image_id: str) -> dict:
    return get_record_or_404(image_id).summary()


@router.get("/{image_id}/pixels/{x}/{y}", summary="Get a single pixel value")
async def get_pixel(image_id: str, x: int, y: int) -> dict:
    record = get_record_or_404(image_id)

    try:
        value = record.image.get_pixel(x, y)
    except IndexError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return {"x": x, "y": y, "value": value}


@router.delete(
    "/{image_id}",
    summary="Forget a decoded image",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_image(image_id: str) -> Response:
    if not image_service.delete_image(image_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Image not found.",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
