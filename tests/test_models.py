"""Tests for Measurement and InfoMessage models."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from fitcalc.kernel.models import InfoMessage, Measurement
from tests.conftest import make_measurement


class TestMeasurement:
    def test_distance(self):
        m = make_measurement(action=5000, len_step=0.65)
        assert m.distance_km() == pytest.approx(3.25)

    def test_mean_speed(self):
        m = make_measurement(action=5000, len_step=0.65, duration=timedelta(minutes=30))
        assert m.mean_speed_kmh() == pytest.approx(6.5)

    def test_zero_duration_speed_is_zero(self):
        m = make_measurement(duration=timedelta(0))
        assert m.mean_speed_kmh() == 0.0

    def test_training_info_defaults(self):
        m = make_measurement(action=5000, len_step=0.65, duration=timedelta(minutes=30))
        info = m.training_info()
        assert info.training_type == "Test"
        assert info.duration == timedelta(minutes=30)
        assert info.distance == pytest.approx(3.25)
        assert info.speed == pytest.approx(6.5)
        assert info.calories == 0.0

    def test_training_info_speed_override(self):
        info = make_measurement().training_info(mean_speed=1.23)
        assert info.speed == 1.23


class TestMeasurementValidation:
    def test_negative_duration_rejected(self):
        with pytest.raises(ValidationError):
            make_measurement(duration=timedelta(minutes=-1))

    def test_negative_action_rejected(self):
        with pytest.raises(ValidationError):
            make_measurement(action=-1)

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            make_measurement(weight=-5.0)

    def test_frozen(self):
        m = make_measurement()
        with pytest.raises(ValidationError):
            m.weight = 100.0

    def test_weight_coerced_to_float(self):
        m = Measurement(
            training_type="Run",
            action=1,
            len_step=1,
            duration=timedelta(minutes=1),
            weight=85,
        )
        assert isinstance(m.weight, float)


class TestInfoMessage:
    def test_duration_minutes(self):
        info = InfoMessage(training_type="Walk", duration=timedelta(hours=3, minutes=45))
        assert info.duration_minutes == 225.0

    def test_defaults(self):
        info = InfoMessage(training_type="Walk", duration=timedelta(0))
        assert info.distance == 0.0
        assert info.speed == 0.0
        assert info.calories == 0.0

    def test_roundtrip_json(self):
        info = InfoMessage(
            training_type="Run",
            duration=timedelta(minutes=30),
            distance=3.25,
            speed=6.5,
            calories=302.9,
        )
        data = info.model_dump(mode="json")
        assert data["training_type"] == "Run"
        assert data["calories"] == 302.9
