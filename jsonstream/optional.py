"""Encoders for values that may be absent (``None``)."""

from __future__ import annotations

from typing import Any

from .stream import Stream


class OptionalEncoder:
    """Writes ``null`` for ``None`` and delegates everything else."""

    def __init__(self, value_encoder: Any) -> None:
        self.value_encoder = value_encoder

    def encode(self, value: Any, stream: Stream) -> None:
        if value is None:
            stream.write_nil()
        else:
            self.value_encoder.encode(value, stream)

    def is_empty(self, value: Any) -> bool:
        return value is None


class DereferenceEncoder:
    """Like :class:`OptionalEncoder`, but a present value is empty when its encoder says so."""

    def __init__(self, value_encoder: Any) -> None:
        self.value_encoder = value_encoder

    def encode(self, value: Any, stream: Stream) -> None:
        if value is None:
            stream.write_nil()
        else:
            self.value_encoder.encode(value, stream)

    def is_empty(self, value: Any) -> bool:
        if value is None:
            return True
        return self.value_encoder.is_empty(value)

    def is_embedded_ptr_nil(self, value: Any) -> bool:
        """Return True when the value, or an embedded value inside it, is absent."""
        if value is None:
            return True
        check = getattr(self.value_encoder, "is_embedded_ptr_nil", None)
        if check is None:
            return False
        return check(value)