"""PipelineCommand - 두 파이프라인이 공유하는 단계 실행 로직."""

from __future__ import annotations

import asyncio
import logging
import time

from ecosort.application.classify.dto import PipelineRun
from ecosort.application.classify.ports import (
    PromptRepositoryPort,
    ReplyExtractorPort,
    VisionModelPort,
)
from ecosort.domain.enums import PipelineStage, PromptVariant
from ecosort.domain.exceptions import DomainError, InferenceError
from ecosort.domain.value_objects import ClassificationQuery, RawModelReply
from ecosort.metrics import PIPELINE_RUN_COUNTER, PIPELINE_STAGE_LATENCY

logger = logging.getLogger(__name__)


class PipelineCommand:
    """분류 파이프라인 공통 베이스.

    외부 호출은 순차 실행, 재시도 없음 (fail-fast).
    """

    pipeline_name = "base"
    prompt_prefix = ""

    def __init__(
        self,
        vision_model: VisionModelPort,
        reply_extractor: ReplyExtractorPort,
        prompt_repository: PromptRepositoryPort,
        *,
        prompt_variant: PromptVariant = PromptVariant.THREE_CLASS,
        max_output_tokens: int,
        inference_timeout: float = 60.0,
    ):
        self._vision = vision_model
        self._extractor = reply_extractor
        self._prompts = prompt_repository
        self._variant = prompt_variant
        self._max_output_tokens = max_output_tokens
        self._inference_timeout = inference_timeout

    @property
    def prompt_name(self) -> str:
        return f"{self.prompt_prefix}_{self._variant.value}"

    def _build_query(self, image_url: str) -> ClassificationQuery:
        return ClassificationQuery(
            instruction_text=self._prompts.get_prompt(self.prompt_name),
            image_url=image_url,
            max_output_tokens=self._max_output_tokens,
        )

    async def _classify(self, run: PipelineRun, query: ClassificationQuery) -> RawModelReply:
        """→ classified. timeout은 InferenceError로 변환."""
        start = time.perf_counter()
        try:
            reply = await asyncio.wait_for(
                self._vision.classify(query),
                timeout=self._inference_timeout,
            )
        except asyncio.TimeoutError as exc:
            error = InferenceError(
                details=f"Inference call timed out after {self._inference_timeout}s"
            )
            self._fail(run, PipelineStage.CLASSIFIED, error)
            raise error from exc
        except InferenceError as exc:
            self._fail(run, PipelineStage.CLASSIFIED, exc)
            raise

        self._observe(run, PipelineStage.CLASSIFIED, start)
        logger.debug(
            "Model reply received",
            extra={**run.log_context(), "reply_length": len(reply.text)},
        )
        return reply

    def _observe(self, run: PipelineRun, stage: PipelineStage, start: float) -> None:
        """단계 완료 기록 (상태 전이 + latency)."""
        elapsed = time.perf_counter() - start
        run.advance(stage, elapsed * 1000)
        PIPELINE_STAGE_LATENCY.labels(pipeline=self.pipeline_name, stage=stage.value).observe(
            elapsed
        )
        logger.info(
            "Pipeline stage completed",
            extra={**run.log_context(), "elapsed_ms": elapsed * 1000},
        )

    def _fail(self, run: PipelineRun, stage: PipelineStage, exc: DomainError) -> None:
        run.fail(stage, exc)
        exc.stage = stage
        PIPELINE_RUN_COUNTER.labels(
            pipeline=self.pipeline_name, status="failed", stage=stage.value
        ).inc()
        logger.warning(
            "Pipeline stage failed",
            extra={
                **run.log_context(),
                "failed_stage": stage.value,
                "error_type": type(exc).__name__,
                "error": exc.message,
            },
        )

    def _finish(self, run: PipelineRun) -> None:
        run.advance(PipelineStage.DONE)
        PIPELINE_RUN_COUNTER.labels(
            pipeline=self.pipeline_name, status="success", stage=PipelineStage.DONE.value
        ).inc()
        logger.info(
            "Pipeline completed",
            extra={**run.log_context(), **run.latencies, "warnings": run.warnings},
        )
