# phonebook_core/storage.py
"""
PhonebookStorage: persists the whole contact list as one binary file.

Responsibilities:
- Encode the full list and overwrite the target file on every save
- Decode the file on load
- Create the parent directory when needed

Failures never propagate: load() falls back to an empty list and save()
reports through its SaveResult, logging the error either way.
"""

import os
import struct
import logging
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from phonebook_core.codec import CodecError, decode_contacts, encode_contacts
from phonebook_core.model import Contact

log = logging.getLogger(__name__)


@dataclass
class SaveResult:
    success: bool
    message: str
    count: int = 0
    path: Optional[str] = None

    def __bool__(self):
        return self.success


class PhonebookStorage:
    def __init__(self, file_path: Union[str, Path], logger: Optional[logging.Logger] = None):
        self.file_path = Path(file_path)
        self.log = logger or log
        self.log.info("PhonebookStorage created for file: %s", self.file_path.absolute())

    def exists(self) -> bool:
        return self.file_path.exists()

    def save(self, contacts: Iterable[Contact]) -> SaveResult:
        contacts = list(contacts)
        tmp = self.file_path.with_name(self.file_path.name + ".tmp")
        try:
            payload = encode_contacts(contacts)
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.file_path)
        except (OSError, ValueError, struct.error, CodecError) as e:
            self.log.error("Failed to save contacts to %s", self.file_path, exc_info=True)
            with suppress(OSError):
                tmp.unlink(missing_ok=True)
            return SaveResult(False, f"Save failed: {e}", len(contacts), str(self.file_path))

        self.log.info("Saved contacts. Count: %d", len(contacts))
        return SaveResult(True, "Saved", len(contacts), str(self.file_path))

    def load(self) -> List[Contact]:
        if not self.file_path.exists():
            self.log.warning("File %s not found. Returning empty contact list.", self.file_path)
            return []

        try:
            data = self.file_path.read_bytes()
            contacts = decode_contacts(data)
        except (OSError, CodecError):
            self.log.error("Failed to load contacts from %s", self.file_path, exc_info=True)
            return []

        self.log.info("Loaded contacts. Count: %d", len(contacts))
        return contacts
