"""Encoders for records with named fields, written as JSON objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Sequence

from .numbers import EncodeError
from .stream import Stream


def _field_value(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj[name]
    return getattr(obj, name)


class StructFieldEncoder:
    """Encodes one named field of a record."""

    def __init__(self, field_name: str, field_encoder: Any, omitempty: bool = False) -> None:
        self.field_name = field_name
        self.field_encoder = field_encoder
        self.omitempty = omitempty

    def encode(self, obj: Any, stream: Stream) -> None:
        value = _field_value(obj, self.field_name)
        try:
            self.field_encoder.encode(value, stream)
        except EncodeError as exc:
            raise EncodeError(f"{self.field_name}: {exc}") from exc

    def is_empty(self, obj: Any) -> bool:
        return self.field_encoder.is_empty(_field_value(obj, self.field_name))

    def is_embedded_ptr_nil(self, obj: Any) -> bool:
        check = getattr(self.field_encoder, "is_embedded_ptr_nil", None)
        if check is None:
            return False
        return check(_field_value(obj, self.field_name))


@dataclass
class Binding:
    """A record field together with the JSON names it is written under.

    ``tagged`` tells whether the name was given explicitly; ``levels`` is the
    path of embedded records the field was reached through.
    """

    field_name: str
    to_names: Sequence[str]
    encoder: StructFieldEncoder
    tagged: bool = False
    levels: Sequence[int] = field(default_factory=tuple)


@dataclass(frozen=True)
class FieldTo:
    """A field encoder and the name it is written under."""

    encoder: StructFieldEncoder
    to_name: str


def resolve_conflict_binding(old: Binding, new: Binding) -> tuple[bool, bool]:
    """Decide which of two bindings for the same name to drop.

    Returns ``(ignore_old, ignore_new)``: a tagged field beats an untagged one,
    otherwise the shallower field wins, and equal candidates cancel out.
    """
    if new.tagged and not old.tagged:
        return True, False
    if old.tagged and not new.tagged:
        return True, False
    if len(old.levels) > len(new.levels):
        return True, False
    if len(new.levels) > len(old.levels):
        return False, True
    return True, True


class StructEncoder:
    """Writes a record as a JSON object, field by field in order."""

    def __init__(self, type_name: str, fields: Sequence[FieldTo] = ()) -> None:
        self.type_name = type_name
        self.fields = list(fields)

    def encode(self, obj: Any, stream: Stream) -> None:
        try:
            stream.write_object_start()
            first = True
            for entry in self.fields:
                encoder = entry.encoder
                if encoder.omitempty and encoder.is_empty(obj):
                    continue
                if encoder.is_embedded_ptr_nil(obj):
                    continue
                if not first:
                    stream.write_more()
                stream.write_object_field(entry.to_name)
                encoder.encode(obj, stream)
                first = False
            stream.write_object_end()
        except EncodeError as exc:
            raise EncodeError(f"{self.type_name}.{exc}") from exc

    def is_empty(self, obj: Any) -> bool:
        """A record is never left out as empty."""
        return False


class EmptyStructEncoder:
    """Writes ``{}`` for a record with no fields."""

    def encode(self, obj: Any, stream: Stream) -> None:
        stream.write_empty_object()

    def is_empty(self, obj: Any) -> bool:
        """A record is never left out as empty."""
        return False


@dataclass
class _Candidate:
    binding: Binding
    to_name: str
    ignored: bool = False


def encoder_of_struct(type_name: str, bindings: Sequence[Binding]):
    """Build an encoder for a record from its field bindings, resolving name clashes."""
    ordered: list[_Candidate] = []
    for binding in bindings:
        for to_name in binding.to_names:
            new = _Candidate(binding, to_name)
            for old in ordered:
                if old.to_name != to_name:
                    continue
                old.ignored, new.ignored = resolve_conflict_binding(old.binding, new.binding)
            ordered.append(new)
    if not ordered:
        return EmptyStructEncoder()
    fields = [FieldTo(c.binding.encoder, c.to_name) for c in ordered if not c.ignored]
    return StructEncoder(type_name, fields)


class StringModeNumberEncoder:
    """Writes a number wrapped in quotes."""

    def __init__(self, elem_encoder: Any) -> None:
        self.elem_encoder = elem_encoder

    def encode(self, value: Any, stream: Stream) -> None:
        stream.write_raw('"')
        self.elem_encoder.encode(value, stream)
        stream.write_raw('"')

    def is_empty(self, value: Any) -> bool:
        return self.elem_encoder.is_empty(value)


class StringModeStringEncoder:
    """Encodes a value, then writes that JSON text as a JSON string."""

    def __init__(self, elem_encoder: Any, indent_step: int = 0) -> None:
        self.elem_encoder = elem_encoder
        self.indent_step = indent_step

    def encode(self, value: Any, stream: Stream) -> None:
        temp = Stream(None, 512, self.indent_step)
        temp.attachment = stream.attachment
        self.elem_encoder.encode(value, temp)
        stream.write_string(temp.buffer().decode("utf-8", "surrogatepass"))

    def is_empty(self, value: Any) -> bool:
        return self.elem_encoder.is_empty(value)