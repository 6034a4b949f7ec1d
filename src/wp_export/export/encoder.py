"""Encoders turning collected entries into a serialized catalogue."""

from typing import Optional, Protocol

import polib

from ..utils.logging import get_logger
from .entry import TranslationEntry

logger = get_logger(__name__)


class Encoder(Protocol):
    """Interface of a translation catalogue writer."""

    def add_entry(self, entry: TranslationEntry) -> None: ...

    def set_header(self, name: str, value: str) -> None: ...

    def set_comment_before_headers(self, text: str) -> None: ...

    def export(self) -> str: ...


class InsertionOrderPOFile(polib.POFile):
    """POFile writing its headers in the order they were set."""

    def ordered_metadata(self) -> list[tuple[str, str]]:
        return list(self.metadata.items())


class PolibEncoder:
    """PO catalogue writer backed by polib.

    Entries are keyed by (context, source): adding an entry whose key is
    already present replaces the earlier one in place. Headers are written
    in the order they were set.
    """

    def __init__(self, wrapwidth: int = 78, po_file: Optional[polib.POFile] = None):
        """Initialize the encoder.

        Args:
            wrapwidth: Line width at which polib wraps long strings
            po_file: Existing catalogue to write into (creates empty if None).
                A plain polib.POFile keeps polib's own header ordering.
        """
        self.po = po_file if po_file is not None else InsertionOrderPOFile(wrapwidth=wrapwidth)
        self._index: dict[tuple[str, str], polib.POEntry] = {
            (e.msgctxt or "", e.msgid): e for e in self.po
        }

    def add_entry(self, entry: TranslationEntry) -> None:
        """Add an entry, replacing one with the same (context, source) key."""
        existing = self._index.get(entry.key)
        if existing is not None:
            logger.debug(f"Replacing duplicate entry: {entry.singular!r}")
            existing.msgstr = entry.translation
            existing.comment = entry.extracted_comments
            return

        po_entry = polib.POEntry(
            msgid=entry.singular,
            msgstr=entry.translation,
            msgctxt=entry.context or None,
            comment=entry.extracted_comments,
        )
        self.po.append(po_entry)
        self._index[entry.key] = po_entry

    def set_header(self, name: str, value: str) -> None:
        """Set a header, keeping its position if it was already set."""
        self.po.metadata[name] = value

    def set_comment_before_headers(self, text: str) -> None:
        """Set the comment block written above the headers."""
        self.po.header = text

    def export(self) -> str:
        """Serialize the catalogue to PO text."""
        return str(self.po)

    def __len__(self) -> int:
        return len(self.po)
