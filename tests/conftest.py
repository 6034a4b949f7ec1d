"""Shared fixtures for the export tests."""

from datetime import datetime, timezone

import pytest

from src.wp_export.export import Language, POExport
from src.wp_export.utils.config_loader import ExportConfig

FIXED_TIME = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
SITE_URL = "https://example.org"


class RecordingEncoder:
    """Encoder double recording every call it receives."""

    def __init__(self):
        self.entries = []
        self.headers = []
        self.comment = None
        self.exports = 0

    def add_entry(self, entry):
        self.entries.append(entry)

    def set_header(self, name, value):
        self.headers.append((name, value))

    def set_comment_before_headers(self, text):
        self.comment = text

    def export(self):
        self.exports += 1
        return "exported"


@pytest.fixture
def source_language():
    return Language(slug="en", locale="en_US", name="English")


@pytest.fixture
def target_language():
    return Language(slug="fr", locale="fr_FR", name="Français")


@pytest.fixture
def encoder():
    return RecordingEncoder()


@pytest.fixture
def config():
    return ExportConfig(app_name="Polylang", app_version="3.6.1")


@pytest.fixture
def export(source_language, target_language, encoder, config):
    """POExport wired to a recording encoder and a fixed clock."""
    return POExport(
        source_language,
        target_language,
        encoder=encoder,
        site_url=SITE_URL,
        clock=lambda: FIXED_TIME,
        config=config,
    )


@pytest.fixture
def po_export(source_language, target_language, config):
    """POExport using the polib encoder."""
    return POExport(
        source_language,
        target_language,
        site_url=SITE_URL,
        clock=lambda: FIXED_TIME,
        config=config,
    )
