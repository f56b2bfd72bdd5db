# phonebook_core/editor.py
"""
Helpers behind a contact edit form.

The form works with a name field and a list of "Label: number" lines.
These functions turn form input into a Contact and back; they hold no UI state.
"""

from typing import Iterable, List

from phonebook_core.model import Contact, PhoneNumber


class ContactValidationError(ValueError):
    """Raised when form input cannot become a Contact."""
    pass


def parse_phone_lines(lines: Iterable[str]) -> List[PhoneNumber]:
    return [PhoneNumber.parse(line) for line in lines if line and line.strip()]


def build_contact(name: str, phone_lines: Iterable[str] = ()) -> Contact:
    full_name = (name or "").strip()
    if not full_name:
        raise ContactValidationError("Full name must not be empty")
    return Contact(full_name, parse_phone_lines(phone_lines))


def format_phone_lines(contact: Contact) -> List[str]:
    return [str(p) for p in contact.phones]
