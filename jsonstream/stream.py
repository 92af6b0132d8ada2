"""A buffered JSON writer with optional indentation."""

from __future__ import annotations

from typing import BinaryIO, Optional

from .escape import quote, quote_html
from .numbers import (
    format_float32,
    format_float32_lossy,
    format_float64,
    format_float64_lossy,
    format_integer,
)


class Stream:
    """Writes JSON tokens into an internal buffer, optionally flushed to ``out``.

    ``out`` is any object with a binary ``write`` method, or ``None`` to keep
    everything in the buffer. ``indent_step`` is the number of spaces added per
    nesting level; zero writes compact JSON.
    """

    def __init__(
        self,
        out: Optional[BinaryIO] = None,
        buffer_size: int = 512,
        indent_step: int = 0,
    ) -> None:
        if buffer_size < 0:
            raise ValueError("buffer_size must not be negative")
        if indent_step < 0:
            raise ValueError("indent_step must not be negative")
        self._out = out
        self._buf = bytearray()
        self._capacity = buffer_size
        self.indent_step = indent_step
        self._indention = 0
        self.attachment = None

    def _append(self, data: bytes) -> None:
        self._buf += data
        if len(self._buf) > self._capacity:
            self._capacity = max(len(self._buf), 2 * self._capacity)

    def _append_text(self, text: str) -> None:
        self._append(text.encode("utf-8", "surrogatepass"))

    def reset(self, out: Optional[BinaryIO]) -> None:
        """Reuse this stream with a new writer, discarding buffered output."""
        self._out = out
        self._buf.clear()

    def available(self) -> int:
        """Return how many bytes are unused in the buffer."""
        return self._capacity - len(self._buf)

    def buffered(self) -> int:
        """Return how many bytes are waiting in the buffer."""
        return len(self._buf)

    def buffer(self) -> bytes:
        """Return the buffered output."""
        return bytes(self._buf)

    def set_buffer(self, buf: bytes) -> None:
        """Replace the buffer contents."""
        self._buf = bytearray(buf)
        self._capacity = max(self._capacity, len(self._buf))

    def write(self, data: bytes) -> int:
        """Append ``data``; with a writer attached, hand the buffer over to it.

        Returns the number of bytes accepted.
        """
        chunk = bytes(data)
        self._append(chunk)
        if self._out is None:
            return len(chunk)
        written = self._out.write(bytes(self._buf))
        if written is None:
            written = len(self._buf)
        del self._buf[:written]
        self._capacity -= written
        return written

    def flush(self) -> None:
        """Write buffered output to the attached writer, if there is one."""
        if self._out is None:
            return
        self._out.write(bytes(self._buf))
        self._buf.clear()

    def write_raw(self, s: str) -> None:
        """Write ``s`` as is, without quotes or escaping."""
        self._append_text(s)

    def write_nil(self) -> None:
        self._append(b"null")

    def write_true(self) -> None:
        self._append(b"true")

    def write_false(self) -> None:
        self._append(b"false")

    def write_bool(self, value: bool) -> None:
        if value:
            self.write_true()
        else:
            self.write_false()

    def _write_indention(self, delta: int) -> None:
        if self._indention == 0:
            return
        self._append(b"\n" + b" " * (self._indention - delta))

    def write_object_start(self) -> None:
        self._indention += self.indent_step
        self._append(b"{")
        self._write_indention(0)

    def write_object_field(self, field: str) -> None:
        self.write_string(field)
        self._append(b": " if self._indention > 0 else b":")

    def write_object_end(self) -> None:
        self._write_indention(self.indent_step)
        self._indention -= self.indent_step
        self._append(b"}")

    def write_empty_object(self) -> None:
        self._append(b"{}")

    def write_more(self) -> None:
        self._append(b",")
        self._write_indention(0)

    def write_array_start(self) -> None:
        self._indention += self.indent_step
        self._append(b"[")
        self._write_indention(0)

    def write_empty_array(self) -> None:
        self._append(b"[]")

    def write_array_end(self) -> None:
        self._write_indention(self.indent_step)
        self._indention -= self.indent_step
        self._append(b"]")

    def write_string(self, s: str) -> None:
        """Write ``s`` as a quoted JSON string."""
        self._append_text(quote(s))

    def write_string_with_html_escaped(self, s: str) -> None:
        """Write ``s`` as a quoted JSON string with HTML-sensitive characters escaped."""
        self._append_text(quote_html(s))

    def write_int8(self, value: int) -> None:
        self.write_raw(format_integer(value, 8, True))

    def write_int16(self, value: int) -> None:
        self.write_raw(format_integer(value, 16, True))

    def write_int32(self, value: int) -> None:
        self.write_raw(format_integer(value, 32, True))

    def write_int64(self, value: int) -> None:
        self.write_raw(format_integer(value, 64, True))

    def write_int(self, value: int) -> None:
        self.write_int64(value)

    def write_uint8(self, value: int) -> None:
        self.write_raw(format_integer(value, 8, False))

    def write_uint16(self, value: int) -> None:
        self.write_raw(format_integer(value, 16, False))

    def write_uint32(self, value: int) -> None:
        self.write_raw(format_integer(value, 32, False))

    def write_uint64(self, value: int) -> None:
        self.write_raw(format_integer(value, 64, False))

    def write_uint(self, value: int) -> None:
        self.write_uint64(value)

    def write_float32(self, value: float) -> None:
        self.write_raw(format_float32(value))

    def write_float64(self, value: float) -> None:
        self.write_raw(format_float64(value))

    def write_float32_lossy(self, value: float) -> None:
        self.write_raw(format_float32_lossy(value))

    def write_float64_lossy(self, value: float) -> None:
        self.write_raw(format_float64_lossy(value))