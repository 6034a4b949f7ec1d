"""Site languages as seen by the export files."""

import html
from dataclasses import dataclass
from typing import Optional, Protocol


class LocaleProvider(Protocol):
    """Anything able to report its locale for display."""

    def get_display_locale(self) -> str: ...


@dataclass(frozen=True)
class Language:
    """A language configured on the site."""

    slug: str  # e.g. "fr"
    locale: str  # WordPress locale, e.g. "fr_FR"
    name: Optional[str] = None  # e.g. "Français"

    def get_display_locale(self) -> str:
        """Locale escaped for output in a document."""
        return html.escape(self.locale)

    def __str__(self) -> str:
        return self.name or self.locale
