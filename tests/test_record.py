"""Tests for shopping API records."""

import pytest

from src.wp_export.models import PickupService


class TestPickupService:
    def test_fields_unset_initially(self):
        service = PickupService()
        assert service.get("carrier_name") is None
        assert service.get_country() is None
        assert service.get_service_name() is None

    def test_set_then_get(self):
        service = PickupService()
        service.set("country", "US")
        assert service.get("country") == "US"
        assert service.get_country() == "US"

    def test_last_value_wins(self):
        service = PickupService()
        service.set_carrier_name("UPS")
        service.set_carrier_name("FedEx")
        assert service.get_carrier_name() == "FedEx"
        assert service.get("carrier_name") == "FedEx"

    def test_setters_are_independent(self):
        service = PickupService()
        service.set_service_name("Ground")
        assert service.get_service_name() == "Ground"
        assert service.get_carrier_name() is None
        assert service.get_country() is None

    def test_unknown_field(self):
        service = PickupService()
        with pytest.raises(AttributeError):
            service.set("weight", "2kg")
        with pytest.raises(AttributeError):
            service.get("weight")

    def test_to_dict_uses_camel_case(self):
        service = PickupService(carrier_name="UPS", country="US")
        assert service.to_dict() == {"carrierName": "UPS", "country": "US"}

    def test_from_dict(self):
        service = PickupService.from_dict(
            {"carrierName": "DHL", "service_name": "Express", "unknown": 1}
        )
        assert service.get_carrier_name() == "DHL"
        assert service.get_service_name() == "Express"
        assert service.get_country() is None
