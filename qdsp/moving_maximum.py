"""Sliding window maximum with O(log2 L) cost per sample."""

from __future__ import annotations

__all__ = ["MovingMaximum"]

_VERY_LARGE = 3.40e38


def _smallest_pow2(n: int) -> int:
    return 1 << (n - 1).bit_length()


class MovingMaximum:
    """Maximum of the latest `size` samples, kept in a binary tree of maxima."""

    def __init__(self, size: int) -> None:
        size = int(size)
        if size < 1:
            raise ValueError("window size must be at least 1")
        self.size = size
        self._input_index = 0
        self._data = [-_VERY_LARGE] * (_smallest_pow2(size) * 2)

    @classmethod
    def from_duration(cls, duration: float, sps: float) -> "MovingMaximum":
        return cls(int(duration * sps))

    def __call__(self, value: float) -> float:
        data = self._data
        index = len(data) // 2 + self._input_index
        while index > 1:
            data[index] = value
            sibling = data[index ^ 1]
            if value < sibling:
                value = sibling
            index //= 2

        self._input_index += 1
        if self._input_index >= self.size:
            self._input_index = 0
        return value