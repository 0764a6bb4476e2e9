"""ClassifyUploadCommand - 업로드 → 분류 → 추출 → 정리 오케스트레이션.

received → stored → classified → extracted → cleaned → done
실패 시 failed(stage, cause)로 종료.
"""

from __future__ import annotations

import asyncio
import logging
import time

from ecosort.application.classify.commands.base import PipelineCommand
from ecosort.application.classify.dto import PipelineRun, UploadOutcome
from ecosort.application.classify.ports import (
    BlobStorePort,
    PromptRepositoryPort,
    ReplyExtractorPort,
    VisionModelPort,
)
from ecosort.domain.enums import PipelineStage, PromptVariant
from ecosort.domain.exceptions import (
    DomainError,
    ExtractionError,
    StorageDeleteError,
    StorageWriteError,
)
from ecosort.domain.value_objects import (
    ClassificationResult,
    RawModelReply,
    StoredObjectRef,
    UploadRequest,
)
from ecosort.metrics import CLEANUP_FAILURE_COUNTER

logger = logging.getLogger(__name__)

CLEANUP_WARNING = "stored object cleanup failed"


class ClassifyUploadCommand(PipelineCommand):
    """업로드 이미지 분류 파이프라인.

    Blob 생성부터 삭제까지 전체 수명을 소유한다.

    정리 정책:
    - classify/extract 실패 시 객체는 남겨둔다 (cleanup_on_failure=True면 삭제 시도)
    - 추출 후 삭제 실패는 결과를 버리지 않고 경고로 반환 (strict_cleanup=True면 실패 처리)
    """

    pipeline_name = "upload"
    prompt_prefix = "waste_classification"

    def __init__(
        self,
        blob_store: BlobStorePort,
        vision_model: VisionModelPort,
        reply_extractor: ReplyExtractorPort,
        prompt_repository: PromptRepositoryPort,
        *,
        prompt_variant: PromptVariant = PromptVariant.THREE_CLASS,
        max_output_tokens: int = 500,
        storage_timeout: float = 15.0,
        inference_timeout: float = 60.0,
        strict_cleanup: bool = False,
        cleanup_on_failure: bool = False,
    ):
        """초기화.

        Args:
            blob_store: Blob Store Port
            vision_model: Vision 모델 Port
            reply_extractor: 응답 추출 Port
            prompt_repository: 프롬프트 리포지토리 Port
            prompt_variant: 카테고리 체계
            max_output_tokens: 응답 토큰 상한
            storage_timeout: 저장/삭제 deadline (초)
            inference_timeout: 모델 호출 deadline (초)
            strict_cleanup: 삭제 실패를 요청 실패로 처리
            cleanup_on_failure: classify/extract 실패 시 객체 삭제 시도
        """
        super().__init__(
            vision_model,
            reply_extractor,
            prompt_repository,
            prompt_variant=prompt_variant,
            max_output_tokens=max_output_tokens,
            inference_timeout=inference_timeout,
        )
        self._blob_store = blob_store
        self._storage_timeout = storage_timeout
        self._strict_cleanup = strict_cleanup
        self._cleanup_on_failure = cleanup_on_failure

    async def execute(self, request: UploadRequest) -> UploadOutcome:
        """파이프라인 실행.

        Args:
            request: 업로드 요청

        Returns:
            분류 결과 + 경고

        Raises:
            DomainError: 단계 실패 (exc.stage에 실패 단계)
        """
        run = PipelineRun(pipeline=self.pipeline_name)
        logger.info(
            "Upload pipeline started",
            extra={
                **run.log_context(),
                "key": request.name,
                "content_type": request.mime_type,
                "size_bytes": request.byte_length,
            },
        )

        stored = await self._store(run, request)

        try:
            query = self._build_query(stored.public_url)
            reply = await self._classify(run, query)
            result = self._extract(run, reply)
        except DomainError:
            if self._cleanup_on_failure:
                await self._discard(run, stored.key)
            raise

        await self._cleanup(run, stored)
        self._finish(run)
        return UploadOutcome(result=result, warnings=tuple(run.warnings))

    # ==========================================
    # Stages
    # ==========================================

    async def _store(self, run: PipelineRun, request: UploadRequest) -> StoredObjectRef:
        """received → stored.

        deadline 초과 시 executor 스레드의 put이 뒤늦게 완료될 수 있어
        같은 키로 best-effort 삭제를 시도한다.
        """
        start = time.perf_counter()
        try:
            stored = await asyncio.wait_for(
                self._blob_store.put(request.name, request.data, request.mime_type),
                timeout=self._storage_timeout,
            )
        except asyncio.TimeoutError as exc:
            error = StorageWriteError(
                details=f"Storage write timed out after {self._storage_timeout}s"
            )
            self._fail(run, PipelineStage.STORED, error)
            await self._discard(run, request.name)
            raise error from exc
        except StorageWriteError as exc:
            self._fail(run, PipelineStage.STORED, exc)
            raise

        self._observe(run, PipelineStage.STORED, start)
        return stored

    def _extract(self, run: PipelineRun, reply: RawModelReply) -> ClassificationResult:
        """classified → extracted."""
        start = time.perf_counter()
        try:
            result = self._extractor.extract_json(reply.text)
        except ExtractionError as exc:
            self._fail(run, PipelineStage.EXTRACTED, exc)
            raise

        self._observe(run, PipelineStage.EXTRACTED, start)
        return result

    async def _cleanup(self, run: PipelineRun, stored: StoredObjectRef) -> None:
        """extracted → cleaned.

        삭제 실패 시 기본적으로 extracted → done (경고 포함).
        """
        start = time.perf_counter()
        try:
            await self._delete(stored.key)
        except StorageDeleteError as exc:
            CLEANUP_FAILURE_COUNTER.labels(reason="post_extract").inc()
            if self._strict_cleanup:
                self._fail(run, PipelineStage.CLEANED, exc)
                raise
            run.warn(CLEANUP_WARNING)
            logger.warning(
                "Stored object cleanup failed, returning classification result",
                extra={**run.log_context(), "key": stored.key, "error": str(exc.details)},
            )
            return

        self._observe(run, PipelineStage.CLEANED, start)

    async def _discard(self, run: PipelineRun, key: str) -> None:
        """실패 경로의 best-effort 삭제. 원래 예외를 가리지 않는다."""
        try:
            await self._delete(key)
        except StorageDeleteError as exc:
            CLEANUP_FAILURE_COUNTER.labels(reason="after_failure").inc()
            logger.warning(
                "Stored object cleanup after failure did not succeed",
                extra={**run.log_context(), "key": key, "error": str(exc.details)},
            )
            return
        logger.info(
            "Stored object removed after failure",
            extra={**run.log_context(), "key": key},
        )

    async def _delete(self, key: str) -> None:
        try:
            await asyncio.wait_for(self._blob_store.delete(key), timeout=self._storage_timeout)
        except asyncio.TimeoutError as exc:
            raise StorageDeleteError(
                details=f"Storage delete timed out after {self._storage_timeout}s"
            ) from exc
