"""
File upload endpoint for product images and AR models
"""

import asyncio
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from typing import Optional
import structlog

from storefront.api.dependencies import get_catalog, get_signer, get_storage
from storefront.models.product import IMAGE_FIELDS
from storefront.services.catalog import CatalogService
from storefront.services.object_storage import ObjectStorage
from storefront.services.signed_urls import SignedUrlService

logger = structlog.get_logger(__name__)
router = APIRouter()

UPLOAD_TYPES = ("image", "ar-model")


def file_extension(filename: Optional[str]) -> str:
    if not filename or "." not in filename:
        return "bin"
    return filename.rsplit(".", 1)[-1].lower()


def storage_key(product_id: int, upload_type: str, extension: str, index: Optional[int] = None) -> str:
    """Object key for a product file"""
    if upload_type == "image":
        return f"products/{product_id}/images/product-{product_id}-image-{index}.{extension}"
    return f"products/{product_id}/ar/product-{product_id}-model.{extension}"


@router.post("")
async def upload_file(
    file: Optional[UploadFile] = File(None),
    product_id: int = Form(..., alias="productId"),
    upload_type: str = Form(..., alias="type"),
    index: Optional[int] = Form(None),
    catalog: CatalogService = Depends(get_catalog),
    storage: ObjectStorage = Depends(get_storage),
    signer: SignedUrlService = Depends(get_signer),
):
    """
    Upload an image or AR model for a product

    - **file**: file contents
    - **productId**: product the file belongs to
    - **type**: `image` or `ar-model`
    - **index**: image slot 1-4 (images only)
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file provided")
    if upload_type not in UPLOAD_TYPES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid file type")
    if upload_type == "image" and (index is None or not 1 <= index <= len(IMAGE_FIELDS)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Image index must be between 1 and 4"
        )

    try:
        product = await catalog.get_active_product(product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found"
            )

        extension = file_extension(file.filename)
        if upload_type == "image":
            field = IMAGE_FIELDS[index - 1]
            content_type = f"image/{extension}"
        else:
            field = "glb_file" if extension == "glb" else "usdz_file"
            content_type = f"model/{extension}"
        if file.content_type and file.content_type != "application/octet-stream":
            content_type = file.content_type

        key = storage_key(product_id, upload_type, extension, index)
        body = await file.read()
        await asyncio.to_thread(storage.put_object, key, body, content_type)
        if not await catalog.attach_file(product_id, field, key):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found"
            )

        logger.info(f"Uploaded {upload_type} for product {product_id} to {key}")
        return {"url": await signer.sign(key), "key": key}

    except HTTPException:
        raise
    except Exception as e:
        await catalog.session.rollback()
        logger.error(f"Upload error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Upload failed"
        )
