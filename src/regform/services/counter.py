"""Click counter demo; starts at zero, not persisted."""

from __future__ import annotations


class Counter:
    def __init__(self) -> None:
        self.count = 0

    def click(self) -> int:
        self.count += 1
        return self.count

    @property
    def label(self) -> str:
        return f"Count: {self.count}"
