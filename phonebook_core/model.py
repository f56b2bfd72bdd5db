# phonebook_core/model.py
"""
Phonebook data model: PhoneType, PhoneNumber, Contact.

A Contact is identified by its full name only. Two Contact objects with the
same name are the same contact for lookup/update/remove, whatever phones they
carry. Nothing enforces uniqueness, so with duplicate names the first match
in list order wins.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class PhoneType(Enum):
    MOBILE = ("Mobile", 0)
    HOME = ("Home", 1)
    WORK = ("Work", 2)
    FAX = ("Fax", 3)

    def __init__(self, label: str, tag: int):
        self.label = label
        self.tag = tag

    def __str__(self):
        return self.label

    @classmethod
    def from_label(cls, text: Optional[str]) -> "PhoneType":
        """
        Reverse of .label (trimmed, case-insensitive).
        Unknown, empty or None -> MOBILE.
        """
        if text is None:
            return cls.MOBILE
        t = text.strip().lower()
        for pt in cls:
            if pt.label.lower() == t:
                return pt
        return cls.MOBILE

    @classmethod
    def from_tag(cls, tag: int) -> "PhoneType":
        for pt in cls:
            if pt.tag == tag:
                return pt
        raise ValueError(f"Unknown phone type tag: {tag}")


_SEP = ": "


@dataclass
class PhoneNumber:
    number: str
    type: PhoneType = PhoneType.MOBILE

    def __str__(self):
        label = self.type.label if self.type is not None else ""
        return f"{label}{_SEP}{self.number}"

    @staticmethod
    def parse(line: str) -> "PhoneNumber":
        """
        Inverse of str(): "Work: +7 931 ..." -> PhoneNumber("+7 931 ...", WORK).
        A line without the separator is a bare mobile number.
        """
        line = (line or "").strip()
        if _SEP not in line:
            return PhoneNumber(line, PhoneType.MOBILE)
        label, number = line.split(_SEP, 1)
        return PhoneNumber(number.strip(), PhoneType.from_label(label))

    def __hash__(self):
        return hash((self.number, self.type))


@dataclass(eq=False)
class Contact:
    full_name: Optional[str]
    phones: List[PhoneNumber] = field(default_factory=list)

    def add_phone(self, phone: PhoneNumber) -> None:
        self.phones.append(phone)

    def remove_phone(self, phone: PhoneNumber) -> None:
        # first equal phone only; absent -> no-op
        try:
            self.phones.remove(phone)
        except ValueError:
            pass

    def phones_as_string(self) -> str:
        return "; ".join(str(p) for p in self.phones)

    def copy(self) -> "Contact":
        return Contact(self.full_name, [PhoneNumber(p.number, p.type) for p in self.phones])

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Contact):
            return NotImplemented
        return self.full_name == other.full_name

    def __hash__(self):
        return hash(self.full_name)

    def __str__(self):
        return f"{self.full_name} ({self.phones_as_string()})"
