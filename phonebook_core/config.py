# phonebook_core/config.py
"""
Central runtime configuration for the phonebook.
Simple, environment-variable-driven defaults. A settings file
(see phonebook_core/settings.py) may override them.
"""

import os
import logging

# Binary file holding the whole contact list.
PHONEBOOK_DATA_PATH = os.environ.get("PHONEBOOK_DATA_PATH", os.path.join("data", "phonebook.bin"))

# Root log level used by entry points (DEBUG, INFO, WARNING, ...)
PHONEBOOK_LOG_LEVEL = os.environ.get("PHONEBOOK_LOG_LEVEL", "INFO").upper()

# Path to settings file (YAML or JSON). If absent, settings fall back to the values above.
PHONEBOOK_SETTINGS_PATH = os.environ.get("PHONEBOOK_SETTINGS_PATH", os.path.join("config", "phonebook.yaml"))


def configure_logging(level: str = None) -> None:
    """Only entry points call this; library modules just use getLogger(__name__)."""
    name = (level or PHONEBOOK_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
