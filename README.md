# jsonstream

jsonstream writes JSON text into a growable byte buffer. You can also give it
a binary file-like object to flush into. The output is fully determined by
the input:

- Integers are checked against a fixed bit width and signedness.
- Floats use the shortest text that reads back as the same value, at single
  or double precision. Magnitudes below 1e-6 or at least 1e21 are written in
  exponent form. A lossy mode rounds to at most six decimal places.
- Strings are escaped only as far as JSON requires. An HTML-safe mode also
  escapes `<`, `>`, `&`, U+2028 and U+2029, and it replaces lone surrogates
  with `\ufffd`.
- Objects and arrays can be pretty-printed with a configurable indent step.

The package uses only the standard library.

## Installing

```
pip install .
```

## Writing values by hand

```python
from jsonstream.stream import Stream

stream = Stream(None, 64, 2)   # no writer, 64-byte initial capacity, indent 2
stream.write_object_start()
stream.write_object_field("hello")
stream.write_int(1)
stream.write_more()
stream.write_object_field("world")
stream.write_int(2)
stream.write_object_end()
print(stream.buffer().decode())
# {
#   "hello": 1,
#   "world": 2
# }
```

`Stream` has writers for these values:

- `null`, `true` and `false`: `write_nil`, `write_true`, `write_false`,
  `write_bool`.
- Strings: `write_string` and `write_string_with_html_escaped`.
- Integers: `write_int8` … `write_int64`, `write_uint8` … `write_uint64`,
  `write_int` and `write_uint`.
- Floats: `write_float32`, `write_float64`, `write_float32_lossy` and
  `write_float64_lossy`.
- Structure: `write_array_start`, `write_array_end`, `write_empty_array`,
  `write_object_start`, `write_object_field`, `write_object_end`,
  `write_empty_object` and `write_more`.
- Unescaped text: `write_raw`.

`buffer()` returns the bytes held so far. `buffered()` and `available()`
report how full the buffer is. `set_buffer()` replaces the buffer's contents,
and `reset(out)` clears the buffer and attaches a new writer.

If `out` is a binary file-like object, `flush()` writes the buffered bytes to
it and empties the buffer. `write(data)` appends bytes and then passes the
whole buffer to `out`.

## Escaping and number formatting

```python
from jsonstream.escape import quote, quote_html
from jsonstream.numbers import format_integer, format_float64, format_float32_lossy

quote('say "hi"')               # '"say \\"hi\\""'
quote_html("<b>")               # '"\\u003cb\\u003e"'
format_integer(-128, 8, True)   # '-128'
format_float64(1e21)            # '1e+21'
format_float32_lossy(0.1234567) # '0.123457'
```

Some values cannot be written and raise `jsonstream.numbers.EncodeError`, a
subclass of `ValueError`:

- infinity and NaN;
- an integer outside the range of its width.

## Encoders

The encoder classes combine into an encoder for a whole structure. Each one
has an `encode(value, stream)` method and an `is_empty(value)` method.

- `jsonstream.native` holds `StringCodec`, `IntCodec(bits, signed)`,
  `FloatCodec(bits)`, `BoolCodec` and `Base64Codec`. `Base64Codec` writes
  bytes as a standard base64 string and `None` as `null`.
  `encoder_of_native(kind)` returns the codec for a basic `Kind`, and `None`
  for composite kinds.
- `jsonstream.optional` holds `OptionalEncoder` and `DereferenceEncoder`.
  Both write `null` for `None` and hand any other value to the wrapped
  encoder. `DereferenceEncoder` also asks the wrapped encoder whether a
  present value is empty.
- `jsonstream.slices.SliceEncoder(elem_encoder, type_name)` writes a sequence
  as an array, an empty sequence as `[]` and `None` as `null`.
- `jsonstream.structs.encoder_of_struct(type_name, bindings)` builds a
  `StructEncoder` from a list of `Binding`s. When there are no names at all
  it builds an `EmptyStructEncoder`. A field's value is read as an attribute
  of the record, or as a key when the record is a mapping.
  - Fields are written in binding order.
  - Fields marked `omitempty` are skipped when empty.
  - Fields whose embedded value is `None` are skipped.
- `StringModeNumberEncoder` writes a value's JSON between quotes.
  `StringModeStringEncoder` encodes a value and then writes that JSON text as
  a JSON string.

When two bindings share a JSON name, `resolve_conflict_binding(old, new)`
decides which one to keep:

- If exactly one of the two is `tagged`, the newer binding is kept.
- Otherwise the binding with fewer `levels` is kept.
- If both have the same number of levels, both are dropped.

Errors raised while encoding nested values are re-raised as `EncodeError`.
The message is prefixed with the field name or the type name.

```python
from jsonstream.native import StringCodec
from jsonstream.slices import SliceEncoder
from jsonstream.stream import Stream

stream = Stream(None, 32, 0)
SliceEncoder(StringCodec(), "[]string").encode(["Crimson", "Red"], stream)
print(stream.buffer().decode())   # ["Crimson","Red"]
```

## What it does not do

jsonstream only writes JSON:

- It does not parse or decode JSON text.
- It does not inspect arbitrary Python objects to choose encoders. You put
  the encoder for a structure together yourself from the classes above.
- It has no encoders for maps or fixed-size arrays.

## Running the tests

```
pip install .[test]
pytest
```