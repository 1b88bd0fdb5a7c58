"""Fixed-size bit storage packed into unsigned machine words."""

from __future__ import annotations

from typing import List

__all__ = ["Bitset"]

_WORD_SIZES = (8, 16, 32, 64)


class Bitset:
    """Bits packed into words of `word_bits` bits; size is rounded up to whole words."""

    def __init__(self, num_bits: int, word_bits: int = 64) -> None:
        if word_bits not in _WORD_SIZES:
            raise ValueError(f"word_bits must be one of {_WORD_SIZES}")
        if num_bits < 0:
            raise ValueError("num_bits must not be negative")
        self.word_bits = word_bits
        self._all_ones = (1 << word_bits) - 1
        self._words = [0] * ((num_bits + word_bits - 1) // word_bits)

    def __len__(self) -> int:
        return len(self._words) * self.word_bits

    @property
    def data(self) -> List[int]:
        """A copy of the storage words."""
        return list(self._words)

    def clear(self) -> None:
        self._words = [0] * len(self._words)

    def set(self, i: int, val: bool) -> None:
        """Set bit i; indices past the storage are ignored."""
        if i < 0:
            raise IndexError("bit index must not be negative")
        if i >= len(self):
            return
        word, bit = divmod(i, self.word_bits)
        mask = 1 << bit
        if val:
            self._words[word] |= mask
        else:
            self._words[word] &= ~mask & self._all_ones

    def set_range(self, i: int, n: int, val: bool) -> None:
        """Set n bits starting at i, clamped to the storage."""
        if i < 0 or n < 0:
            raise IndexError("bit index and count must not be negative")
        size = len(self)
        if i > size:
            return
        end = min(i + n, size)
        pos = i
        while pos < end:
            word = pos // self.word_bits
            base = word * self.word_bits
            lo = pos - base
            hi = min(end - base, self.word_bits)
            mask = ((1 << (hi - lo)) - 1) << lo
            if val:
                self._words[word] |= mask
            else:
                self._words[word] &= ~mask & self._all_ones
            pos = base + self.word_bits

    def get(self, i: int) -> bool:
        """Bit i; indices past the storage read as False."""
        if i < 0:
            raise IndexError("bit index must not be negative")
        if i >= len(self):
            return False
        word, bit = divmod(i, self.word_bits)
        return (self._words[word] >> bit) & 1 == 1