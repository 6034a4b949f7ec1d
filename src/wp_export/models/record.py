"""Data-transfer records for the shopping content API."""

from dataclasses import dataclass, fields
from typing import Any, Optional


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass
class Record:
    """Mutable record of named attributes, all unset until assigned."""

    @classmethod
    def field_names(cls) -> list[str]:
        """Names of the attributes this record exposes."""
        return [f.name for f in fields(cls)]

    def _check_field(self, field_name: str) -> None:
        if field_name not in self.field_names():
            raise AttributeError(
                f"{type(self).__name__} has no field '{field_name}'"
            )

    def set(self, field_name: str, value: Any) -> None:
        """Store a value for a field."""
        self._check_field(field_name)
        setattr(self, field_name, value)

    def get(self, field_name: str) -> Any:
        """Return the last stored value for a field, or None if unset."""
        self._check_field(field_name)
        return getattr(self, field_name)

    def to_dict(self) -> dict:
        """Convert set fields to the API's camelCase representation."""
        return {
            _camel_case(name): getattr(self, name)
            for name in self.field_names()
            if getattr(self, name) is not None
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Record":
        """Create from a dictionary with camelCase or snake_case keys.

        Unknown keys are ignored.
        """
        by_key = {}
        for name in cls.field_names():
            by_key[name] = name
            by_key[_camel_case(name)] = name

        record = cls()
        for key, value in data.items():
            if key in by_key:
                setattr(record, by_key[key], value)
        return record


@dataclass
class PickupService(Record):
    """A pickup service offered by a carrier in a country."""

    carrier_name: Optional[str] = None  # e.g. "UPS"
    country: Optional[str] = None  # CLDR country code, e.g. "US"
    service_name: Optional[str] = None

    def set_carrier_name(self, carrier_name: Optional[str]) -> None:
        self.carrier_name = carrier_name

    def get_carrier_name(self) -> Optional[str]:
        return self.carrier_name

    def set_country(self, country: Optional[str]) -> None:
        self.country = country

    def get_country(self) -> Optional[str]:
        return self.country

    def set_service_name(self, service_name: Optional[str]) -> None:
        self.service_name = service_name

    def get_service_name(self) -> Optional[str]:
        return self.service_name
