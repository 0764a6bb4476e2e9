"""Vision Model Port - 멀티모달 분류 모델 추상화."""

from abc import ABC, abstractmethod

from ecosort.domain.value_objects import ClassificationQuery, RawModelReply


class VisionModelPort(ABC):
    """Vision 모델 포트.

    요청 1건 = text part(지시문) 1개 + image_url part 1개.
    재시도하지 않는다.
    """

    @abstractmethod
    async def classify(self, query: ClassificationQuery) -> RawModelReply:
        """모델 호출 후 원문 응답 반환.

        Raises:
            InferenceError: transport 실패, non-2xx, 빈 choices
        """
        pass
