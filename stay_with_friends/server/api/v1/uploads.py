"""
Image Upload Endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, File, Request, UploadFile, status

from stay_with_friends.core.models.io.stats import UploadResult
from stay_with_friends.server.services.deps import UploadServiceDep
from stay_with_friends.server.services.uploads import public_url

router = APIRouter(tags=["uploads"])


@router.post(
    "/upload-image",
    response_model=UploadResult,
    status_code=status.HTTP_200_OK,
    summary="Upload Image",
    description="Store an image and return the URL it is served from.",
    response_description="Absolute URL under `/uploads`.",
    responses={
        400: {"description": "Not an image, or an empty file"},
        413: {"description": "File exceeds the upload size limit"},
        422: {"description": "No `image` field in the form"},
    },
)
async def upload_image(request: Request, service: UploadServiceDep, image: UploadFile = File(...)) -> UploadResult:
    """
    Upload an image.

    Send the file as the multipart field **image**. Only `image/*` content
    types are accepted.
    """
    # One byte past the limit is enough to reject an oversized file.
    content = await image.read(service.max_bytes + 1)
    name = service.store_image(content, image.content_type, image.filename)
    return UploadResult(url=public_url(name, str(request.base_url)))
