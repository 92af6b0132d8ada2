"""Encoder for sequences, written as JSON arrays."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .numbers import EncodeError
from .stream import Stream


class SliceEncoder:
    """Writes a sequence as a JSON array; ``None`` is written as ``null``."""

    def __init__(self, elem_encoder: Any, type_name: str = "[]") -> None:
        self.elem_encoder = elem_encoder
        self.type_name = type_name

    def encode(self, value: Optional[Sequence[Any]], stream: Stream) -> None:
        if value is None:
            stream.write_nil()
            return
        if len(value) == 0:
            stream.write_empty_array()
            return
        try:
            stream.write_array_start()
            for position, element in enumerate(value):
                if position:
                    stream.write_more()
                self.elem_encoder.encode(element, stream)
            stream.write_array_end()
        except EncodeError as exc:
            raise EncodeError(f"{self.type_name}: {exc}") from exc

    def is_empty(self, value: Optional[Sequence[Any]]) -> bool:
        return value is None or len(value) == 0