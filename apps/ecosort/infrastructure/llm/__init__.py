"""LLM Infrastructure Adapters.

- hf_router: Hugging Face inference providers (OpenAI 호환 라우터)
"""

from ecosort.infrastructure.llm.hf_router import HFRouterVisionAdapter

__all__ = ["HFRouterVisionAdapter"]
