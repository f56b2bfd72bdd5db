# phonebook_core/codec.py
"""
Binary record format for the phonebook file.

Layout (big-endian):
  b"PHBK" | u16 version | u32 count |
  count * ( u32 name_len, name utf-8 | u32 phone_count |
            phone_count * ( u8 type_tag | u32 num_len, number utf-8 ) )

A string length of 0xFFFFFFFF marks None (no bytes follow), so a missing
name or number survives a save/load. Type tag 0xFF marks a phone with no type.

The whole collection is always written in one go; there is no append or
delta form.
"""

import struct
from typing import Iterable, List, Optional, Tuple

from phonebook_core.model import Contact, PhoneNumber, PhoneType

MAGIC = b"PHBK"
VERSION = 1

NULL_LEN = 0xFFFFFFFF
NULL_TAG = 0xFF

_HEADER = struct.Struct(">4sHI")
_U32 = struct.Struct(">I")
_U8 = struct.Struct(">B")


class CodecError(Exception):
    """Raised when contacts cannot be encoded, or bytes cannot be decoded into contacts."""
    pass


def _pack_str(s: Optional[str], what: str) -> bytes:
    if s is None:
        return _U32.pack(NULL_LEN)
    if not isinstance(s, str):
        raise CodecError(f"{what} must be a string, got {type(s).__name__}")
    try:
        raw = s.encode("utf-8")
    except UnicodeEncodeError as e:
        raise CodecError(f"{what} is not encodable as UTF-8: {e}") from e
    if len(raw) >= NULL_LEN:
        raise CodecError(f"{what} is too long ({len(raw)} bytes)")
    return _U32.pack(len(raw)) + raw


def _type_tag(ptype: Optional[PhoneType]) -> int:
    if ptype is None:
        return NULL_TAG
    if not isinstance(ptype, PhoneType):
        raise CodecError(f"Phone type must be a PhoneType, got {type(ptype).__name__}")
    return ptype.tag


def encode_contacts(contacts: Iterable[Contact]) -> bytes:
    contacts = list(contacts)
    out = [_HEADER.pack(MAGIC, VERSION, len(contacts))]
    for c in contacts:
        if not isinstance(c, Contact):
            raise CodecError(f"Expected Contact, got {type(c).__name__}")
        out.append(_pack_str(c.full_name, "Contact name"))
        phones = list(c.phones or [])
        out.append(_U32.pack(len(phones)))
        for p in phones:
            if not isinstance(p, PhoneNumber):
                raise CodecError(f"Expected PhoneNumber in {c.full_name!r}, got {type(p).__name__}")
            out.append(_U8.pack(_type_tag(p.type)))
            out.append(_pack_str(p.number, "Phone number"))
    return b"".join(out)


class _Reader:
    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    def take(self, n: int) -> bytes:
        end = self.pos + n
        if end > len(self.data):
            raise CodecError(f"Truncated data at offset {self.pos} (need {n} bytes)")
        chunk = self.data[self.pos:end]
        self.pos = end
        return chunk

    def unpack(self, st: struct.Struct) -> Tuple:
        return st.unpack(self.take(st.size))

    def u32(self) -> int:
        return self.unpack(_U32)[0]

    def string(self) -> Optional[str]:
        n = self.u32()
        if n == NULL_LEN:
            return None
        raw = self.take(n)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CodecError(f"Invalid UTF-8 string: {e}") from e


def decode_contacts(data: bytes) -> List[Contact]:
    r = _Reader(data)
    magic, version, count = r.unpack(_HEADER)
    if magic != MAGIC:
        raise CodecError(f"Bad magic {magic!r}, not a phonebook file")
    if version != VERSION:
        raise CodecError(f"Unsupported format version {version}")

    contacts: List[Contact] = []
    for _ in range(count):
        contact = Contact(r.string())
        for _ in range(r.u32()):
            (tag,) = r.unpack(_U8)
            if tag == NULL_TAG:
                ptype = None
            else:
                try:
                    ptype = PhoneType.from_tag(tag)
                except ValueError as e:
                    raise CodecError(str(e)) from e
            contact.add_phone(PhoneNumber(r.string(), ptype))
        contacts.append(contact)

    if r.pos != len(data):
        raise CodecError(f"{len(data) - r.pos} trailing bytes after {count} contacts")
    return contacts
