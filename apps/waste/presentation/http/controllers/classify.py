"""Classify Controller."""

from __future__ import annotations

import logging

from fastapi import APIRouter, File, UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile

from waste.application.common.exceptions import PayloadTooLargeError
from waste.presentation.http.schemas import ClassificationResponse, ErrorResponse
from waste.setup.dependencies import ClassifyCommandDep, SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["classify"])


@router.post(
    "/classify",
    response_model=ClassificationResponse,
    summary="Classify a waste image",
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def classify(
    command: ClassifyCommandDep,
    settings: SettingsDep,
    image: UploadFile | str | None = File(
        None, description="Image file (multipart field 'image')"
    ),
) -> ClassificationResponse:
    """업로드된 이미지를 분류하고 배출 안내를 반환합니다.

    폼 파서는 Starlette UploadFile을 넘깁니다.
    파일이 아닌 'image' 폼 필드는 이미지 누락으로 취급합니다.
    """
    image_bytes: bytes | None = None
    if isinstance(image, StarletteUploadFile):
        try:
            # 제한 + 1 바이트까지만 읽어 초과 여부 판단
            image_bytes = await image.read(settings.max_upload_bytes + 1)
        finally:
            await image.close()
        if len(image_bytes) > settings.max_upload_bytes:
            logger.warning(
                "Upload rejected",
                extra={
                    "upload_filename": image.filename,
                    "limit_bytes": settings.max_upload_bytes,
                },
            )
            raise PayloadTooLargeError(settings.max_upload_bytes)

    result = await command.execute(image_bytes)
    return ClassificationResponse(**result.to_dict())
