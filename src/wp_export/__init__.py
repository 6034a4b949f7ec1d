"""WordPress translation export package.

This package provides tools for:
- Collecting translatable strings from site content
- Rendering them as gettext PO export files
- Shopping API data-transfer records
"""

__version__ = "1.0.0"
