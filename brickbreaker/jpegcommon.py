"""State and table allocation shared by JPEG encoders and decoders."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, TypeVar

DCT_SIZE2 = 64
HUFF_BITS_LENGTH = 17
HUFF_VALUES_LENGTH = 256

_T = TypeVar("_T")


class JpegError(Exception):
    """Raised when a codec object is used in a state that does not allow it."""


@dataclass
class QuantTable:
    """A quantization table of 64 values in natural order."""

    quantval: list[int] = field(default_factory=lambda: [0] * DCT_SIZE2)
    sent_table: bool = False


@dataclass
class HuffTable:
    """A Huffman table: code counts per length and the symbol values."""

    bits: list[int] = field(default_factory=lambda: [0] * HUFF_BITS_LENGTH)
    huffval: list[int] = field(default_factory=lambda: [0] * HUFF_VALUES_LENGTH)
    sent_table: bool = False


class CodecState(enum.Enum):
    """Overall state of a codec object."""

    DESTROYED = enum.auto()
    COMPRESS_START = enum.auto()
    COMPRESS_RUNNING = enum.auto()
    DECOMPRESS_START = enum.auto()
    DECOMPRESS_RUNNING = enum.auto()


class CodecObject:
    """A compression or decompression object owning two pools of storage.

    The permanent pool outlives an abort; the transient pool holds what
    belongs to a single image and is released by ``abort``.
    """

    def __init__(self, is_decompressor: bool = False) -> None:
        self.is_decompressor = is_decompressor
        self.permanent: list[Any] = []
        self.transient: list[Any] = []
        self._alive = True
        self.global_state = self._start_state

    @property
    def _start_state(self) -> CodecState:
        if self.is_decompressor:
            return CodecState.DECOMPRESS_START
        return CodecState.COMPRESS_START

    def _require_alive(self) -> None:
        if not self._alive:
            raise JpegError("codec object has been destroyed")

    def _allocate(self, obj: _T, permanent: bool = False) -> _T:
        self._require_alive()
        (self.permanent if permanent else self.transient).append(obj)
        return obj

    def abort(self) -> None:
        """Release per-image storage and return to the start state."""
        self._require_alive()
        self.transient.clear()
        self.global_state = self._start_state

    def destroy(self) -> None:
        """Release all storage; calling it again is harmless."""
        self.permanent.clear()
        self.transient.clear()
        self._alive = False
        self.global_state = CodecState.DESTROYED

    def alloc_quant_table(self) -> QuantTable:
        """Allocate a quantization table in the permanent pool."""
        return self._allocate(QuantTable(), permanent=True)

    def alloc_huff_table(self) -> HuffTable:
        """Allocate a Huffman table in the permanent pool."""
        return self._allocate(HuffTable(), permanent=True)