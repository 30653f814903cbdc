"""Tests for configuration validation."""

import pytest

from salonbook import config


class TestConfigValidation:
    def test_defaults_pass_validation(self):
        config.validate_settings()  # should not raise

    def test_default_channel_statuses(self):
        assert config.CLIENT_BOOKING_STATUS == "confirmed"
        assert config.STAFF_BOOKING_STATUS == "pending"

    def test_invalid_booking_status(self, monkeypatch):
        monkeypatch.setattr(config, "STAFF_BOOKING_STATUS", "completed")
        with pytest.raises(ValueError, match="STAFF_BOOKING_STATUS"):
            config.validate_settings()

    @pytest.mark.parametrize("interval", [0, -30, 1441])
    def test_invalid_slot_interval(self, monkeypatch, interval):
        monkeypatch.setattr(config, "SLOT_INTERVAL_MINUTES", interval)
        with pytest.raises(ValueError, match="SLOT_INTERVAL_MINUTES"):
            config.validate_settings()

    def test_default_hours_must_be_ordered(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_HOURS_START", "18:00")
        monkeypatch.setattr(config, "DEFAULT_HOURS_END", "09:00")
        with pytest.raises(ValueError, match="DEFAULT_HOURS_START"):
            config.validate_settings()
