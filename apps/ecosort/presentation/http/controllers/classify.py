"""Classify API Controller.

- POST /upload: 이미지 업로드 → 분류 결과 JSON
- POST /type: 공개 이미지 URL → 타입 라벨
"""

from __future__ import annotations

import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError
from starlette.datastructures import UploadFile

from ecosort.application.common.exceptions import (
    FileRequiredError,
    ImageUrlRequiredError,
    UploadTooLargeError,
)
from ecosort.domain.value_objects import UploadRequest
from ecosort.setup.constants import WARNING_HEADER
from ecosort.setup.dependencies import (
    ClassifyTypeCommandDep,
    ClassifyUploadCommandDep,
    SettingsDep,
)

router = APIRouter(tags=["classify"])
logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


# ─────────────────────────────────────────────────────────────────────────────
# Schemas
# ─────────────────────────────────────────────────────────────────────────────


class TypeLabelRequest(BaseModel):
    """타입 분류 요청 스키마."""

    image_url: str | None = Field(
        default=None, alias="imageUrl", description="공개 이미지 URL"
    )


class TypeLabelResponse(BaseModel):
    """타입 분류 응답 스키마."""

    type: str


# ─────────────────────────────────────────────────────────────────────────────
# Input Dependencies
# 커맨드(외부 클라이언트) 생성보다 먼저 검증되도록 의존성 순서상 앞에 둔다.
# ─────────────────────────────────────────────────────────────────────────────


async def read_upload_request(request: Request, settings: SettingsDep) -> UploadRequest:
    """multipart "file" 필드 → UploadRequest.

    Raises:
        FileRequiredError: 파일 필드 누락
        UploadTooLargeError: 크기 초과
    """
    form = await request.form()
    upload = form.get("file")
    if not isinstance(upload, UploadFile) or not upload.filename:
        raise FileRequiredError()

    data = await upload.read()
    if len(data) > settings.max_upload_bytes:
        raise UploadTooLargeError(len(data), settings.max_upload_bytes)

    try:
        return UploadRequest(
            name=upload.filename,
            mime_type=upload.content_type or DEFAULT_CONTENT_TYPE,
            data=data,
        )
    except ValueError:
        raise FileRequiredError() from None


async def read_image_url(request: Request) -> str:
    """JSON body의 imageUrl 추출.

    Raises:
        ImageUrlRequiredError: imageUrl 누락/빈 값/본문 파싱 실패
    """
    try:
        payload = TypeLabelRequest.model_validate(await request.json())
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError):
        raise ImageUrlRequiredError() from None

    image_url = (payload.image_url or "").strip()
    if not image_url:
        raise ImageUrlRequiredError()
    return image_url


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────


@router.post(
    "/upload",
    summary="Upload an image and classify the waste item",
    responses={400: {"description": "No file uploaded"}, 500: {"description": "Pipeline failure"}},
)
async def upload(
    upload_request: Annotated[UploadRequest, Depends(read_upload_request)],
    command: ClassifyUploadCommandDep,
) -> JSONResponse:
    outcome = await command.execute(upload_request)

    headers = {}
    if outcome.warnings:
        headers[WARNING_HEADER] = "; ".join(outcome.warnings)
    return JSONResponse(content=outcome.result, headers=headers)


@router.post(
    "/type",
    response_model=TypeLabelResponse,
    summary="Classify a public image URL into a bare type label",
    responses={400: {"description": "No image URL provided"}},
)
async def classify_type(
    image_url: Annotated[str, Depends(read_image_url)],
    command: ClassifyTypeCommandDep,
) -> TypeLabelResponse:
    label = await command.execute(image_url)
    return TypeLabelResponse(type=label)
