"""Inference 클라이언트 공통 설정.

타임아웃, 연결 제한, 재시도 설정 등.
"""

import httpx

# ==========================================
# HTTP 타임아웃 설정
# ==========================================

INFERENCE_TIMEOUT = httpx.Timeout(
    connect=5.0,
    read=60.0,
    write=10.0,
    pool=5.0,
)

# ==========================================
# HTTP 연결 제한 설정
# ==========================================

INFERENCE_LIMITS = httpx.Limits(
    max_connections=100,
    max_keepalive_connections=20,
    keepalive_expiry=30.0,
)

# ==========================================
# 클라이언트 공통 설정
# ==========================================

# 재시도는 하지 않는다 (Orchestrator 책임)
MAX_RETRIES = 0

DEFAULT_BASE_URL = "https://router.huggingface.co/v1"
DEFAULT_PROVIDER = "nebius"
DEFAULT_MODEL = "google/gemma-3-27b-it"
