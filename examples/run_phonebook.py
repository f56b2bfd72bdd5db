# examples/run_phonebook.py
"""
Run this from the project root:

python -m examples.run_phonebook

This demonstrates:
- Loading settings and building a PhonebookService over the binary file
- Adding contacts built from edit-form input
- Searching, sorting, updating and removing
- Checking SaveResult after each mutation
"""

import logging

from phonebook_core import config
from phonebook_core.editor import build_contact
from phonebook_core.model import PhoneNumber
from phonebook_core.service import PhonebookService
from phonebook_core.settings import get_settings

log = logging.getLogger("run_phonebook")


def demo():
    settings = get_settings()
    config.configure_logging(settings.log_level)

    service = PhonebookService.from_path(settings.data_path)

    petrov = build_contact("Петров Пётр Петрович", ["Mobile: +79319222321", "Work: +7 812 555 01 01"])
    ivanov = build_contact("Иванов Иван Иванович", ["Mobile: +79319222322"])

    for c in (petrov, ivanov):
        res = service.add_contact(c)
        if not res:
            log.warning("Could not persist %s: %s", c.full_name, res.message)

    print("ALL:", [str(c) for c in service.get_all_contacts()])
    print("SORTED:", [c.full_name for c in service.get_sorted_by_name()])
    print("SEARCH 'Иван':", [c.full_name for c in service.search("Иван")])
    print("SEARCH '2322':", [c.full_name for c in service.search("2322")])

    updated = ivanov.copy()
    updated.add_phone(PhoneNumber.parse("Home: 123 45 67"))
    service.update_contact(ivanov, updated)
    print("UPDATED:", str(service.search("Иванов")[0]))

    service.remove_contact(petrov)
    service.remove_contact(ivanov)
    print("LEFT:", len(service))


if __name__ == "__main__":
    demo()
