# tests/test_codec.py
import struct
import pytest
from phonebook_core.codec import CodecError, MAGIC, NULL_LEN, VERSION, decode_contacts, encode_contacts
from phonebook_core.model import Contact, PhoneNumber, PhoneType


def _sample():
    return [
        Contact("Петров Пётр Петрович", [PhoneNumber("+79319222321"), PhoneNumber("8 812 000", PhoneType.FAX)]),
        Contact("Nobody"),
        Contact("Иванов Иван Иванович", [PhoneNumber("+79319222322", PhoneType.WORK)]),
    ]

def test_round_trip_preserves_names_phones_and_order():
    out = decode_contacts(encode_contacts(_sample()))
    assert [c.full_name for c in out] == [c.full_name for c in _sample()]
    assert [c.phones for c in out] == [c.phones for c in _sample()]

def test_layout_of_single_contact():
    data = encode_contacts([Contact("A", [PhoneNumber("1", PhoneType.HOME)])])
    expected = (
        MAGIC + struct.pack(">HI", VERSION, 1)
        + struct.pack(">I", 1) + b"A"
        + struct.pack(">I", 1)
        + struct.pack(">B", 1) + struct.pack(">I", 1) + b"1"
    )
    assert data == expected

def test_empty_list_and_none_values_survive():
    assert decode_contacts(encode_contacts([])) == []
    out = decode_contacts(encode_contacts([Contact(None, [PhoneNumber(None, None)]), Contact("")]))
    assert out[0].full_name is None
    assert out[0].phones[0].number is None
    assert out[0].phones[0].type is None
    assert out[1].full_name == ""

def test_none_name_uses_null_length_marker():
    data = encode_contacts([Contact(None)])
    assert data[10:14] == struct.pack(">I", NULL_LEN)
    assert len(data) == 10 + 4 + 4

def test_bad_magic():
    data = b"XXXX" + encode_contacts([])[4:]
    with pytest.raises(CodecError):
        decode_contacts(data)

def test_unsupported_version():
    data = MAGIC + struct.pack(">HI", VERSION + 1, 0)
    with pytest.raises(CodecError):
        decode_contacts(data)

def test_truncated_and_trailing_data():
    data = encode_contacts(_sample())
    with pytest.raises(CodecError):
        decode_contacts(data[:-3])
    with pytest.raises(CodecError):
        decode_contacts(data + b"\x00")
    with pytest.raises(CodecError):
        decode_contacts(b"")

def test_unknown_type_tag():
    data = bytearray(encode_contacts([Contact("A", [PhoneNumber("1")])]))
    # header(10) + name(4+1) + phone count(4) -> type tag
    data[19] = 99
    with pytest.raises(CodecError):
        decode_contacts(bytes(data))

def test_invalid_utf8_string():
    data = (
        MAGIC + struct.pack(">HI", VERSION, 1)
        + struct.pack(">I", 2) + b"\xff\xfe"
        + struct.pack(">I", 0)
    )
    with pytest.raises(CodecError):
        decode_contacts(data)

def test_encode_rejects_bad_field_types():
    with pytest.raises(CodecError):
        encode_contacts([Contact("A", [PhoneNumber(123)])])
    with pytest.raises(CodecError):
        encode_contacts([Contact("A", [PhoneNumber("1", "Work")])])
    with pytest.raises(CodecError):
        encode_contacts([Contact(42)])
    with pytest.raises(CodecError):
        encode_contacts(["not a contact"])

def test_encode_rejects_unencodable_text():
    with pytest.raises(CodecError):
        encode_contacts([Contact("bad \ud800 surrogate")])
