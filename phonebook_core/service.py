# phonebook_core/service.py
"""
PhonebookService: the single source of truth for the contact list.

Responsibilities:
- Load the whole list from PhonebookStorage at construction
- Add / update / remove contacts, saving after every mutation
- Search by name or phone substring, sort by name

Non-responsibilities:
- No UI, no dialogs
- No locking: all calls come from one control thread

Contacts are matched by full name (see Contact.__eq__), first match wins.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from phonebook_core.model import Contact
from phonebook_core.storage import PhonebookStorage, SaveResult

log = logging.getLogger(__name__)


def _fold(s: Optional[str]) -> str:
    return (s or "").casefold()


def _fold_number(s: Optional[str]) -> str:
    return _fold(s).replace(" ", "")


class PhonebookService:
    def __init__(self, storage: PhonebookStorage, logger: Optional[logging.Logger] = None):
        self.storage = storage
        self.log = logger or log
        self.last_save: Optional[SaveResult] = None
        self.log.info("Initializing PhonebookService. File: %s", storage.file_path.absolute())
        self._contacts: List[Contact] = list(storage.load())
        self.log.info("Load finished. Contact count: %d", len(self._contacts))

    @classmethod
    def from_path(cls, file_path: Union[str, Path], logger: Optional[logging.Logger] = None) -> "PhonebookService":
        return cls(PhonebookStorage(file_path, logger=logger), logger=logger)

    def __len__(self):
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.get_all_contacts())

    def get_all_contacts(self) -> Tuple[Contact, ...]:
        """Snapshot in insertion order; valid until the next mutating call."""
        return tuple(self._contacts)

    def add_contact(self, contact: Contact) -> SaveResult:
        self._contacts.append(contact)
        self.log.info("Added contact: %s", contact.full_name)
        return self.save()

    def remove_contact(self, contact: Contact) -> SaveResult:
        # absent contact is a no-op, but we still save
        try:
            self._contacts.remove(contact)
            self.log.info("Removed contact: %s", contact.full_name)
        except ValueError:
            self.log.debug("Remove: contact not in list: %s", contact.full_name)
        return self.save()

    def update_contact(self, old_contact: Contact, new_contact: Contact) -> Optional[SaveResult]:
        """
        Replace the first entry equal to old_contact.
        Returns None (and does not save) if old_contact is not in the list.
        """
        try:
            index = self._contacts.index(old_contact)
        except ValueError:
            self.log.warning("Attempt to update a contact that is not in the list: %s", old_contact.full_name)
            return None
        self._contacts[index] = new_contact
        self.log.info("Updated contact: %s -> %s", old_contact.full_name, new_contact.full_name)
        return self.save()

    def search(self, query: Optional[str]) -> List[Contact]:
        """
        Case-insensitive substring match on full name, or on any phone number
        with spaces removed. Blank/None query returns everything.
        """
        if query is None or not query.strip():
            return list(self._contacts)

        name_q = _fold(query)
        number_q = _fold_number(query)

        def matches(c: Contact) -> bool:
            if c.full_name is not None and name_q in _fold(c.full_name):
                return True
            return any(number_q in _fold_number(p.number) for p in c.phones)

        return [c for c in self._contacts if matches(c)]

    def get_sorted_by_name(self) -> List[Contact]:
        # nameless last; sorted() is stable
        return sorted(
            self._contacts,
            key=lambda c: (c.full_name is None, _fold(c.full_name)),
        )

    def save(self) -> SaveResult:
        self.last_save = self.storage.save(self._contacts)
        return self.last_save
