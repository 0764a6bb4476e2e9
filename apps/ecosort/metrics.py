"""Ecosort Prometheus 메트릭"""

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry(auto_describe=True)
METRICS_PATH = "/metrics/status"


def register_metrics(app: FastAPI) -> None:
    """Prometheus /metrics 엔드포인트 등록"""

    @app.get(METRICS_PATH, include_in_schema=False)
    async def metrics_endpoint() -> Response:
        return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)


# ─────────────────────────────────────────────────────────────────────────────
# 파이프라인 비즈니스 메트릭
# ─────────────────────────────────────────────────────────────────────────────

PIPELINE_STAGE_LATENCY = Histogram(
    "ecosort_pipeline_stage_duration_seconds",
    "Duration of each stage in the upload/classify/extract pipeline",
    labelnames=["pipeline", "stage"],
    registry=REGISTRY,
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 3.0, 5.0, 7.5, 10.0, 15.0, 20.0, 30.0, 60.0),
)

PIPELINE_RUN_COUNTER = Counter(
    "ecosort_pipeline_runs_total",
    "Total count of pipeline runs by outcome",
    labelnames=["pipeline", "status", "stage"],  # status: success, failed
    registry=REGISTRY,
)

CLEANUP_FAILURE_COUNTER = Counter(
    "ecosort_cleanup_failures_total",
    "Total count of stored objects that could not be deleted",
    labelnames=["reason"],  # post_extract, after_failure
    registry=REGISTRY,
)
