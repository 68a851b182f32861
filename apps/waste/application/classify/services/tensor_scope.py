"""Tensor Scope.

요청 단위로 생성된 텐서의 참조를 모아 두었다가 블록 종료 시 해제합니다.
성공, 실패, 취소 모든 경로에서 해제됩니다.

dispose()가 있는 객체는 명시적으로 해제하고, numpy 배열처럼 없는 객체는
scope의 참조만 끊습니다. 호출자는 추적한 객체를 scope보다 오래 사는
지역 변수에 묶지 않아야 합니다 (ClassifyImageCommand._classify 참고).
"""

from __future__ import annotations

from types import TracebackType
from typing import Any, TypeVar

T = TypeVar("T")


class TensorScope:
    """요청 단위 텐서 수명 관리자."""

    def __init__(self) -> None:
        self._tensors: list[Any] = []
        self._closed = False

    def track(self, tensor: T) -> T:
        """텐서를 스코프에 등록하고 그대로 반환합니다."""
        if self._closed:
            raise RuntimeError("TensorScope already released")
        self._tensors.append(tensor)
        return tensor

    @property
    def tracked(self) -> int:
        return len(self._tensors)

    @property
    def closed(self) -> bool:
        return self._closed

    def release(self) -> None:
        """등록된 텐서를 모두 해제합니다."""
        while self._tensors:
            tensor = self._tensors.pop()
            dispose = getattr(tensor, "dispose", None)
            if callable(dispose):
                dispose()
            del tensor
        self._closed = True

    def __enter__(self) -> TensorScope:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()
