"""Reply Extractor Port - 모델 응답 파싱 추상화.

정규식 기반 추출은 1차 전략일 뿐, structured output 모드로
교체해도 Orchestrator는 바뀌지 않는다.
"""

from abc import ABC, abstractmethod

from ecosort.domain.value_objects import ClassificationResult


class ReplyExtractorPort(ABC):
    """Reply Extractor 포트."""

    @abstractmethod
    def extract_json(self, raw_text: str) -> ClassificationResult:
        """원문에서 ClassificationResult 추출.

        Raises:
            NoJsonBlockError: 펜스 블록 없음
            MalformedJsonError: JSON 파싱 실패
            SchemaMismatchError: 형태 불일치
        """
        pass

    @abstractmethod
    def extract_type_label(self, raw_text: str) -> str:
        """원문에서 TypeLabel 추출 (trim 후 그대로 반환).

        Raises:
            EmptyReplyError: 빈 응답
        """
        pass
