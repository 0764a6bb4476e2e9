"""ClassifyTypeCommand - 공개 URL 타입 라벨 분류.

Blob Store를 거치지 않는다: received → classified → extracted → done
"""

from __future__ import annotations

import logging
import time

from ecosort.application.classify.commands.base import PipelineCommand
from ecosort.application.classify.dto import PipelineRun
from ecosort.application.classify.ports import (
    PromptRepositoryPort,
    ReplyExtractorPort,
    VisionModelPort,
)
from ecosort.domain.enums import PipelineStage, PromptVariant
from ecosort.domain.exceptions import ExtractionError

logger = logging.getLogger(__name__)


class ClassifyTypeCommand(PipelineCommand):
    """경량 타입 라벨 파이프라인."""

    pipeline_name = "type"
    prompt_prefix = "waste_type"

    def __init__(
        self,
        vision_model: VisionModelPort,
        reply_extractor: ReplyExtractorPort,
        prompt_repository: PromptRepositoryPort,
        *,
        prompt_variant: PromptVariant = PromptVariant.THREE_CLASS,
        max_output_tokens: int = 100,
        inference_timeout: float = 60.0,
    ):
        super().__init__(
            vision_model,
            reply_extractor,
            prompt_repository,
            prompt_variant=prompt_variant,
            max_output_tokens=max_output_tokens,
            inference_timeout=inference_timeout,
        )

    async def execute(self, image_url: str) -> str:
        """이미 공개된 이미지 URL의 타입 라벨 반환.

        Raises:
            InferenceError: 모델 호출 실패
            ExtractionError: 빈 응답 / 라벨 검증 실패
        """
        run = PipelineRun(pipeline=self.pipeline_name)
        logger.info("Type pipeline started", extra={**run.log_context(), "image_url": image_url})

        reply = await self._classify(run, self._build_query(image_url))

        start = time.perf_counter()
        try:
            label = self._extractor.extract_type_label(reply.text)
        except ExtractionError as exc:
            self._fail(run, PipelineStage.EXTRACTED, exc)
            raise
        self._observe(run, PipelineStage.EXTRACTED, start)

        self._finish(run)
        return label
