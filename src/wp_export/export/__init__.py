"""Translation export module."""

from .encoder import Encoder, InsertionOrderPOFile, PolibEncoder
from .entry import TranslationEntry, TranslationEntryRef
from .export_file import ExportFile
from .language import Language
from .po_export import POExport

__all__ = [
    "Encoder",
    "PolibEncoder",
    "InsertionOrderPOFile",
    "TranslationEntry",
    "TranslationEntryRef",
    "ExportFile",
    "Language",
    "POExport",
]
