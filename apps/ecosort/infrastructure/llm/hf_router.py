"""HF Router Vision Adapter - VisionModelPort 구현체.

Hugging Face inference providers의 OpenAI 호환 chat.completions 사용.
provider는 model 접미사로 지정 (예: google/gemma-3-27b-it:nebius).
"""

from __future__ import annotations

import logging

import httpx
from openai import APIError, AsyncOpenAI

from ecosort.application.classify.ports import VisionModelPort
from ecosort.domain.exceptions import InferenceError
from ecosort.domain.value_objects import ClassificationQuery, RawModelReply
from ecosort.infrastructure.llm.config import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    DEFAULT_PROVIDER,
    INFERENCE_LIMITS,
    INFERENCE_TIMEOUT,
    MAX_RETRIES,
)

logger = logging.getLogger(__name__)


class HFRouterVisionAdapter(VisionModelPort):
    """멀티모달 chat completion 구현체.

    요청당 user 메시지 1개 (text part + image_url part).
    """

    def __init__(
        self,
        api_key: str,
        *,
        model: str = DEFAULT_MODEL,
        provider: str | None = DEFAULT_PROVIDER,
        base_url: str = DEFAULT_BASE_URL,
        client: AsyncOpenAI | None = None,
    ):
        """초기화.

        Args:
            api_key: inference provider access token (HF_TOKEN)
            model: 모델 ID
            provider: relay provider 이름 (None이면 라우터 자동 선택)
            base_url: OpenAI 호환 엔드포인트
            client: 테스트용 클라이언트 주입
        """
        if client is None:
            http_client = httpx.AsyncClient(
                timeout=INFERENCE_TIMEOUT,
                limits=INFERENCE_LIMITS,
            )
            client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                http_client=http_client,
                max_retries=MAX_RETRIES,
            )
        self._client = client
        self._model = f"{model}:{provider}" if provider else model
        logger.info("HFRouterVisionAdapter initialized (model=%s)", self._model)

    @property
    def model(self) -> str:
        return self._model

    async def classify(self, query: ClassificationQuery) -> RawModelReply:
        messages = [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": query.instruction_text},
                    {"type": "image_url", "image_url": {"url": query.image_url}},
                ],
            }
        ]

        logger.debug("Vision API call starting (model=%s)", self._model)

        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                max_tokens=query.max_output_tokens,
            )
        except APIError as exc:
            # APIConnectionError, APITimeoutError, APIStatusError(non-2xx) 포함
            logger.error(
                "Vision API call failed",
                extra={
                    "model": self._model,
                    "error_type": type(exc).__name__,
                    "status_code": getattr(exc, "status_code", None),
                },
            )
            raise InferenceError(details=str(exc)) from exc

        if not completion.choices:
            raise InferenceError(details="Provider response contained no choices")

        content = completion.choices[0].message.content or ""

        logger.debug(
            "Vision API call completed (model=%s, reply_length=%d)",
            self._model,
            len(content),
        )
        return RawModelReply(text=content)
