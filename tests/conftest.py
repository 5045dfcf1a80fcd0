import logging
import os

import pytest


@pytest.fixture(autouse=True)
def _clean_engine_env(monkeypatch):
    """Keep NARRATIVE_* variables from the host environment out of tests."""
    for key in list(os.environ):
        if key.startswith("NARRATIVE_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture()
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture()
def story_text():
    return (
        "Captain Rogers stood on the deck as the storm gathered over the harbor. "
        "The crew watched Captain Rogers with quiet hope in their hearts. "
        "Mira climbed the mast and searched the dark horizon for the enemy fleet. "
        "Nobody spoke while the wind screamed through the broken sails. "
        "Suddenly the first cannon shot tore through the night like a blade! "
        "Then Mira shouted a warning and Rogers ordered the crew to their stations. "
        "Fire spread across the lower deck and the shadow of death fell over the ship. "
        "They fought with courage until the enemy fleet finally turned away. "
        "At dawn the harbor was peaceful again and the sun warmed the tired sailors. "
        "Rogers thanked Mira for her bravery and the crew laughed with joy."
    )
