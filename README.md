# drtabi

Encode and decode smart contract arguments and return values.

Every value type can be written in two binary forms:

- **nested**: used when the value sits inside another value, such as a struct
  field or a list item. Fixed-size integers take their full width, and
  variable-length data (byte strings, text, big integers, lists) carries a
  4-byte big-endian length prefix.
- **top-level**: used when the value is a whole argument. Integers use as few
  bytes as they need, and `False`, `0`, an absent option and empty values come
  out as no bytes at all.

A `Serializer` turns a sequence of values into hex parts joined by a
separator, such as `42@4243`, and reads them back.

## Installation

```
pip install drtabi
```

The package needs no third-party libraries.

## Value types

| Module | Types |
| --- | --- |
| `drtabi.small_ints` | `U8Value`, `U16Value`, `U32Value`, `U64Value`, `I8Value`, `I16Value`, `I32Value`, `I64Value` |
| `drtabi.primitives` | `BoolValue`, `BytesValue`, `StringValue`, `AddressValue`, `BigUIntValue`, `BigIntValue` |
| `drtabi.composites` | `StructValue`, `EnumValue`, `ListValue`, `OptionValue` |
| `drtabi.composites` (multi-values) | `MultiValue`, `VariadicValues`, `OptionalValue` |

Each value holds its data in `value` (or `fields`, `items`, `discriminant` for
the composite types). All single values derive from `drtabi.shared.SingleValue`
and have `encode_nested`, `encode_top_level`, `decode_nested` and
`decode_top_level` methods.

Struct and enum fields are `drtabi.shared.Field(value, name="")` objects; the
name only shows up in error messages.

An `AddressValue` must hold exactly 32 bytes. `StringValue` text is stored as
UTF-8.

## Encoding a single value

```python
from drtabi.codec import Codec
from drtabi.small_ints import U16Value
from drtabi.primitives import BigUIntValue

codec = Codec()

codec.encode_nested(U16Value(0x4142)).hex()      # '4142'
codec.encode_top_level(U16Value(0x11)).hex()     # '11'
codec.encode_nested(BigUIntValue(256)).hex()     # '000000020100'

value = U16Value()
codec.decode_nested(bytes.fromhex("4142"), value)
value.value                                       # 0x4142
```

Decoding fills in the value object you pass in, and also returns it. If the
data is malformed, or a value does not fit its type, `drtabi.shared.AbiError`
(a subclass of `ValueError`) is raised.

## Serializing arguments

```python
from drtabi.serializer import Serializer
from drtabi.small_ints import U8Value, U16Value
from drtabi.composites import MultiValue, OptionalValue, VariadicValues

serializer = Serializer("@")

serializer.serialize([U8Value(0x42), U16Value(0x4243)])
# '42@4243'

serializer.serialize([U8Value(0x42), OptionalValue()])
# '42'

serializer.serialize([
    MultiValue([U8Value(0x42), U16Value(0x4243)]),
])
# '42@4243'
```

Each single value takes one part, in its top-level form. A `MultiValue`
spreads its items over several parts, and an `OptionalValue` that holds
nothing takes no part at all.

Decoding works the same way in reverse. You pass in placeholder values, and
they are filled in:

```python
first, second = U8Value(), U16Value()
serializer.deserialize("42@4243", [first, second])
first.value, second.value            # (0x42, 0x4243)

items = VariadicValues(item_creator=U8Value)
serializer.deserialize("2a@2b@2c", [items])
[item.value for item in items.items]  # [42, 43, 44]
```

Some decodes need to build new values as they go. Pass a factory in these
cases:

- `ListValue(item_creator=...)` for list items.
- `EnumValue(fields_provider=...)` for the fields of an enum variant. It is
  called with the discriminant.
- `VariadicValues(item_creator=...)` for variadic values.

An `OptionValue` needs a placeholder value before it can be decoded.

An `OptionalValue` must come last among the values. So must a
`VariadicValues`.

The separator must not be empty. `drtabi.parts.PartsHolder` is the small
builder and reader of raw parts that the serializer uses underneath.

## What the package does not do

Values are built by hand in Python. The package does not read contract ABI
definition files, and it does not check that the items of a variadic or list
value all have the same type.

## Running the tests

```
pip install -e ".[test]"
pytest
```