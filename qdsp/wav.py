"""Reading and writing WAV files as floating point samples."""

from __future__ import annotations

import struct
from typing import BinaryIO, Iterable, List, Optional

__all__ = ["WavReader", "WavWriter", "WavFormatError"]

_FORMAT_PCM = 1
_FORMAT_IEEE_FLOAT = 3
_FORMAT_EXTENSIBLE = 0xFFFE


class WavFormatError(ValueError):
    """The file is not a WAV file this module can read."""


def _decode(raw: bytes, fmt: int, bits: int) -> List[float]:
    if fmt == _FORMAT_IEEE_FLOAT:
        code = "f" if bits == 32 else "d"
        return list(struct.unpack(f"<{len(raw) // (bits // 8)}{code}", raw))
    if bits == 8:
        return [(b - 128) / 128.0 for b in raw]
    if bits == 16:
        return [v / 32768.0 for v in struct.unpack(f"<{len(raw) // 2}h", raw)]
    if bits == 24:
        return [
            int.from_bytes(raw[i : i + 3], "little", signed=True) / 8388608.0
            for i in range(0, len(raw), 3)
        ]
    return [v / 2147483648.0 for v in struct.unpack(f"<{len(raw) // 4}i", raw)]


class WavReader:
    """Reads interleaved samples from a PCM or IEEE float WAV file.

    Counts and positions are in samples (not frames), across all channels.
    """

    def __init__(self, path) -> None:
        self._file: Optional[BinaryIO] = open(path, "rb")
        try:
            self._parse()
        except BaseException:
            self._file.close()
            self._file = None
            raise
        self._position = 0

    def _parse(self) -> None:
        f = self._file
        header = f.read(12)
        if len(header) < 12 or header[:4] != b"RIFF" or header[8:12] != b"WAVE":
            raise WavFormatError("not a RIFF/WAVE file")
        fmt_found = False
        while True:
            chunk = f.read(8)
            if len(chunk) < 8:
                raise WavFormatError("missing fmt or data chunk")
            chunk_id, size = chunk[:4], struct.unpack("<I", chunk[4:])[0]
            if chunk_id == b"fmt ":
                body = f.read(size)
                if len(body) < 16:
                    raise WavFormatError("fmt chunk too short")
                tag, channels, rate, _, _, bits = struct.unpack("<HHIIHH", body[:16])
                if tag == _FORMAT_EXTENSIBLE:
                    if len(body) < 26:
                        raise WavFormatError("extensible fmt chunk too short")
                    tag = struct.unpack("<H", body[24:26])[0]
                self._check_format(tag, bits, channels)
                self._format = tag
                self._bits = bits
                self._channels = channels
                self._sps = float(rate)
                fmt_found = True
                if size % 2:
                    f.read(1)
            elif chunk_id == b"data":
                if not fmt_found:
                    raise WavFormatError("data chunk before fmt chunk")
                self._data_offset = f.tell()
                self._bytes_per_sample = self._bits // 8
                self._length = size // self._bytes_per_sample
                return
            else:
                f.seek(size + (size % 2), 1)

    @staticmethod
    def _check_format(tag: int, bits: int, channels: int) -> None:
        if channels < 1:
            raise WavFormatError("no channels")
        if tag == _FORMAT_PCM and bits in (8, 16, 24, 32):
            return
        if tag == _FORMAT_IEEE_FLOAT and bits in (32, 64):
            return
        raise WavFormatError(f"unsupported format {tag} with {bits} bits")

    def _require_open(self) -> BinaryIO:
        if self._file is None:
            raise ValueError("reader is closed")
        return self._file

    @property
    def sps(self) -> float:
        return self._sps

    @property
    def num_channels(self) -> int:
        return self._channels

    @property
    def length(self) -> int:
        """Total number of samples across all channels."""
        return self._length

    @property
    def position(self) -> int:
        return self._position

    def read(self, count: Optional[int] = None) -> List[float]:
        """Read up to `count` samples (all remaining if None) as floats."""
        f = self._require_open()
        remaining = self._length - self._position
        if count is None or count > remaining:
            count = remaining
        if count < 0:
            raise ValueError("count must not be negative")
        f.seek(self._data_offset + self._position * self._bytes_per_sample)
        raw = f.read(count * self._bytes_per_sample)
        count = len(raw) // self._bytes_per_sample
        raw = raw[: count * self._bytes_per_sample]
        self._position += count
        return _decode(raw, self._format, self._bits)

    def restart(self) -> None:
        self.seek(0)

    def seek(self, target: int) -> None:
        """Move to sample `target`, clamped to the end of the data."""
        self._require_open()
        if target < 0:
            raise ValueError("target must not be negative")
        self._position = min(target, self._length)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "WavReader":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class WavWriter:
    """Writes interleaved 32-bit IEEE float samples to a WAV file."""

    def __init__(self, path, num_channels: int, sps: float) -> None:
        if num_channels < 1:
            raise ValueError("num_channels must be at least 1")
        if sps <= 0:
            raise ValueError("sps must be positive")
        self.num_channels = num_channels
        self.sps = float(sps)
        self._data_size = 0
        self._file: Optional[BinaryIO] = open(path, "wb")
        self._write_header()

    def _write_header(self) -> None:
        rate = int(self.sps)
        block_align = self.num_channels * 4
        f = self._file
        f.seek(0)
        f.write(b"RIFF")
        f.write(struct.pack("<I", 36 + self._data_size))
        f.write(b"WAVE")
        f.write(b"fmt ")
        f.write(
            struct.pack(
                "<IHHIIHH",
                16,
                _FORMAT_IEEE_FLOAT,
                self.num_channels,
                rate,
                rate * block_align,
                block_align,
                32,
            )
        )
        f.write(b"data")
        f.write(struct.pack("<I", self._data_size))

    def write(self, samples: Iterable[float]) -> int:
        """Append samples; returns how many were written."""
        if self._file is None:
            raise ValueError("writer is closed")
        values = list(samples)
        self._file.write(struct.pack(f"<{len(values)}f", *values))
        self._data_size += len(values) * 4
        return len(values)

    def close(self) -> None:
        if self._file is not None:
            self._write_header()
            self._file.close()
            self._file = None

    def __enter__(self) -> "WavWriter":
        return self

    def __exit__(self, *args) -> None:
        self.close()