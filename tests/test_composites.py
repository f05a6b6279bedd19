import pytest

from drtabi.codec import Codec
from drtabi.composites import (
    EnumValue,
    ListValue,
    OptionValue,
    StructValue,
)
from drtabi.primitives import AddressValue, BytesValue
from drtabi.shared import AbiError, Field
from drtabi.small_ints import U8Value, U16Value

codec = Codec()


def two_fields():
    return [Field(U8Value(0x01)), Field(U16Value(0x4142))]


def empty_provider(discriminant):
    return None


def heterogeneous_provider(discriminant):
    return [Field(U8Value()), Field(U16Value())]


# Enum


def test_enum_encode_nested():
    assert codec.encode_nested(EnumValue(discriminant=0)).hex() == "00"
    assert codec.encode_nested(EnumValue(discriminant=42)).hex() == "2a"
    assert codec.encode_nested(EnumValue(42, two_fields())).hex() == "2a014142"


def test_enum_encode_top_level():
    assert codec.encode_top_level(EnumValue(discriminant=0)).hex() == ""
    assert codec.encode_top_level(EnumValue(discriminant=42)).hex() == "2a"
    assert codec.encode_top_level(EnumValue(42, two_fields())).hex() == "2a014142"


def test_enum_decode_nested_simple():
    destination = EnumValue(fields_provider=empty_provider)
    codec.decode_nested(bytes.fromhex("2a"), destination)
    assert destination.discriminant == 42
    assert destination.fields == []


def test_enum_decode_nested_simple_zero():
    destination = EnumValue(fields_provider=empty_provider)
    codec.decode_nested(bytes.fromhex("00"), destination)
    assert destination.discriminant == 0
    assert destination.fields == []


def test_enum_decode_nested_heterogeneous():
    destination = EnumValue(fields_provider=heterogeneous_provider)
    codec.decode_nested(bytes.fromhex("01014142"), destination)
    assert destination.discriminant == 1
    assert destination.fields == two_fields()


def test_enum_decode_top_level_simple():
    destination = EnumValue(fields_provider=empty_provider)
    codec.decode_top_level(bytes.fromhex("2a"), destination)
    assert destination.discriminant == 42
    assert destination.fields == []


def test_enum_decode_top_level_simple_zero():
    destination = EnumValue(discriminant=7, fields_provider=empty_provider)
    codec.decode_top_level(b"", destination)
    assert destination.discriminant == 0
    assert destination.fields == []


def test_enum_decode_top_level_heterogeneous():
    destination = EnumValue(fields_provider=heterogeneous_provider)
    codec.decode_top_level(bytes.fromhex("01014142"), destination)
    assert destination.discriminant == 1
    assert destination.fields == two_fields()


def test_enum_decode_without_provider():
    with pytest.raises(AbiError, match="cannot decode enum: fields provider is nil"):
        codec.decode_nested(b"\x01", EnumValue())


def test_enum_encode_field_error_names_field():
    value = EnumValue(1, [Field(AddressValue(b"\x01\x02"), name="to")])
    with pytest.raises(AbiError, match="cannot encode field 'to' of enum"):
        codec.encode_nested(value)


def test_enum_decode_field_error_names_field():
    destination = EnumValue(fields_provider=lambda d: [Field(U16Value(), name="amount")])
    with pytest.raises(AbiError, match="cannot decode field 'amount' of enum"):
        codec.decode_nested(bytes.fromhex("0101"), destination)


# List


def three_u16():
    return [U16Value(1), U16Value(2), U16Value(3)]


def test_list_encode_nested():
    assert codec.encode_nested(ListValue(three_u16())).hex() == "00000003000100020003"


def test_list_encode_top_level():
    assert codec.encode_top_level(ListValue(three_u16())).hex() == "000100020003"


def test_list_decode_nested():
    destination = ListValue(items=[], item_creator=U16Value)
    codec.decode_nested(bytes.fromhex("00000003000100020003"), destination)
    assert destination.items == three_u16()


def test_list_decode_top_level():
    destination = ListValue(items=[], item_creator=U16Value)
    codec.decode_top_level(bytes.fromhex("000100020003"), destination)
    assert destination.items == three_u16()


def test_list_decode_without_item_creator():
    with pytest.raises(AbiError, match="cannot decode list: item creator is nil"):
        codec.decode_top_level(bytes.fromhex("0001"), ListValue())


def test_list_decode_top_level_of_nothing_is_empty():
    destination = ListValue(items=[U16Value(9)], item_creator=U16Value)
    codec.decode_top_level(b"", destination)
    assert destination.items == []


def test_list_of_bytes_round_trip():
    original = ListValue([BytesValue(b"\x03\x42"), BytesValue(b"\x07\x43")])
    encoded = codec.encode_nested(original)
    assert encoded.hex() == "00000002000000020342000000020743"
    decoded = codec.decode_nested(encoded, ListValue(item_creator=BytesValue))
    assert decoded == original


# Option


def test_option_encode_nested():
    assert codec.encode_nested(OptionValue(None)).hex() == "00"
    assert codec.encode_nested(OptionValue(U16Value(0x08))).hex() == "010008"


def test_option_encode_top_level():
    assert codec.encode_top_level(OptionValue(None)).hex() == ""
    assert codec.encode_top_level(OptionValue(U16Value(0x08))).hex() == "010008"


def test_option_decode_nested():
    assert codec.decode_nested(bytes.fromhex("00"), OptionValue(U8Value())) == OptionValue(None)
    assert codec.decode_nested(
        bytes.fromhex("010008"), OptionValue(U16Value())
    ) == OptionValue(U16Value(0x08))


def test_option_decode_nested_nil_placeholder():
    with pytest.raises(AbiError, match="placeholder value of option should be set before decoding"):
        codec.decode_nested(bytes.fromhex("072a"), OptionValue())


def test_option_decode_nested_bad_marker():
    with pytest.raises(AbiError, match="invalid first byte for nested encoded option: 7"):
        codec.decode_nested(bytes.fromhex("072a"), OptionValue(BytesValue()))


def test_option_decode_top_level():
    assert codec.decode_top_level(b"", OptionValue(U8Value())) == OptionValue(None)
    assert codec.decode_top_level(
        bytes.fromhex("010008"), OptionValue(U16Value())
    ) == OptionValue(U16Value(0x08))


def test_option_decode_top_level_nil_placeholder():
    with pytest.raises(AbiError, match="placeholder value of option should be set before decoding"):
        codec.decode_top_level(bytes.fromhex("072a"), OptionValue())


@pytest.mark.parametrize(
    "encoded, message",
    [
        ("002a", "invalid first byte for top-level encoded option: 0"),
        ("072a", "invalid first byte for top-level encoded option: 7"),
    ],
)
def test_option_decode_top_level_bad_marker(encoded, message):
    with pytest.raises(AbiError, match=message):
        codec.decode_top_level(bytes.fromhex(encoded), OptionValue(BytesValue()))


# Struct


def test_struct_encode_nested():
    assert codec.encode_nested(StructValue(two_fields())).hex() == "014142"


def test_struct_encode_top_level():
    assert codec.encode_top_level(StructValue(two_fields())).hex() == "014142"


def test_struct_decode_nested():
    destination = StructValue([Field(U8Value()), Field(U16Value())])
    codec.decode_nested(bytes.fromhex("014142"), destination)
    assert destination == StructValue(two_fields())


def test_struct_decode_top_level():
    destination = StructValue([Field(U8Value()), Field(U16Value())])
    codec.decode_top_level(bytes.fromhex("014142"), destination)
    assert destination == StructValue(two_fields())


def test_struct_decode_error_names_field():
    destination = StructValue([Field(U8Value(), name="a"), Field(U16Value(), name="b")])
    with pytest.raises(AbiError, match="cannot decode field 'b' of struct"):
        codec.decode_nested(bytes.fromhex("0141"), destination)


def test_struct_encode_error_names_field():
    value = StructValue([Field(AddressValue(b"\x00"), name="owner")])
    with pytest.raises(AbiError, match="cannot encode field 'owner' of struct"):
        codec.encode_top_level(value)