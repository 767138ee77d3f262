from __future__ import annotations

__all__ = ["PackedBuffer", "BitWriter", "BitReader"]

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class PackedBuffer:
    """An immutable run of bits.

    Bits are stored most significant first. The last byte of `data` is padded with zero bits when
    `bit_length` is not a multiple of 8, so two buffers holding the same bits compare equal.
    """

    data: bytes
    bit_length: int

    def __post_init__(self):
        if len(self.data) != -(-self.bit_length // 8):
            raise ValueError(
                f"Expected {-(-self.bit_length // 8)} bytes to hold {self.bit_length} bits, "
                f"but got {len(self.data)} bytes"
            )

    @staticmethod
    def from_words(words: Iterator[int], width: int) -> PackedBuffer:
        writer = BitWriter()
        for word in words:
            writer.write(word & ((1 << width) - 1), width)
        return writer.finish()

    def words(self, width: int) -> Iterator[int]:
        return BitReader(self).words(width)

    def to_bits(self) -> str:
        if self.bit_length == 0:
            return ""
        return format(int.from_bytes(self.data, "big"), f"0{len(self.data) * 8}b")[
            : self.bit_length
        ]

    def __len__(self):
        return self.bit_length

    def __repr__(self):
        return f"PackedBuffer({self.data!r}, bit_length={self.bit_length})"


class BitWriter:
    """Append fixed-width words to a growing run of bits.

    Whole bytes are flushed as soon as they are complete, so at most 7 bits are ever held back.
    """

    def __init__(self):
        self._bytes = bytearray()
        self._accumulator = 0
        self._pending = 0
        self.bit_length = 0

    def write(self, word: int, width: int):
        # word must already be masked to width
        self._accumulator = (self._accumulator << width) | word
        self._pending += width
        self.bit_length += width

        if self._pending >= 8:
            keep = self._pending % 8
            self._bytes += (self._accumulator >> keep).to_bytes(self._pending // 8, "big")
            self._accumulator &= (1 << keep) - 1
            self._pending = keep

    def finish(self) -> PackedBuffer:
        data = bytes(self._bytes)
        if self._pending > 0:
            data += (self._accumulator << (8 - self._pending)).to_bytes(1, "big")
        return PackedBuffer(data, self.bit_length)


class BitReader:
    """Read fixed-width words from a packed buffer, starting at its first bit."""

    def __init__(self, buffer: PackedBuffer):
        self._data = buffer.data
        self._remaining = buffer.bit_length
        self._position = 0
        self._accumulator = 0
        self._pending = 0

    def read(self, width: int) -> int:
        if width > self._remaining:
            raise EOFError(f"Expected {width} more bits, but only {self._remaining} remain")

        if self._pending < width:
            needed = -(-(width - self._pending) // 8)
            chunk = self._data[self._position : self._position + needed]
            self._accumulator = (self._accumulator << (8 * needed)) | int.from_bytes(chunk, "big")
            self._position += needed
            self._pending += 8 * needed

        self._pending -= width
        self._remaining -= width
        word = self._accumulator >> self._pending
        self._accumulator &= (1 << self._pending) - 1
        return word

    def words(self, width: int) -> Iterator[int]:
        for _ in range(self._remaining // width):
            yield self.read(width)
