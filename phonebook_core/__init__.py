"""
Phonebook core: contact model, binary storage and the directory service.
"""

from .model import Contact, PhoneNumber, PhoneType
from .storage import PhonebookStorage, SaveResult
from .service import PhonebookService

__all__ = [
    "Contact",
    "PhoneNumber",
    "PhoneType",
    "PhonebookService",
    "PhonebookStorage",
    "SaveResult",
]
