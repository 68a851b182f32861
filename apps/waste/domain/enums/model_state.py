"""Model State Enum."""

from enum import Enum


class ModelState(str, Enum):
    """분류 모델 수명주기 상태.

    PENDING → LOADING → READY → UNLOADED
                      ↘ FAILED
    FAILED, UNLOADED는 종료 상태입니다 (재로드 없음).
    """

    PENDING = "pending"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"
    UNLOADED = "unloaded"

    @property
    def is_terminal(self) -> bool:
        return self in (ModelState.FAILED, ModelState.UNLOADED)
