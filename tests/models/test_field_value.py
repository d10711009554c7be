"""
Tests for FieldValue
Verifies the confidence/source invariants every brief slot relies on.
"""
import pytest
from pydantic import ValidationError

from brief_engine.models.base import CONFIDENCE_THRESHOLD, FieldSource, FieldValue


class TestScored:
    """Source is derived from the confidence threshold"""

    def test_at_threshold_is_inferred(self):
        field = FieldValue.scored("instagram", CONFIDENCE_THRESHOLD)
        assert field.source == FieldSource.INFERRED
        assert field.is_known

    def test_below_threshold_is_pending(self):
        field = FieldValue.scored("instagram", 0.74)
        assert field.source == FieldSource.PENDING
        assert not field.is_known

    def test_soft_default_keeps_value(self):
        field = FieldValue.scored("single_asset", 0.3)
        assert field.value == "single_asset"
        assert field.confidence == 0.3
        assert field.source == FieldSource.PENDING

    def test_none_value_is_empty(self):
        assert FieldValue.scored(None, 0.9) == FieldValue.empty()

    @pytest.mark.parametrize("confidence,expected", [(1.7, 1.0), (-0.2, 0.0)])
    def test_confidence_clamped(self, confidence, expected):
        assert FieldValue.scored("x", confidence).confidence == expected

    def test_records_rule(self):
        assert FieldValue.scored("x", 0.8, inferred_from="quoted").inferred_from == "quoted"


class TestInvariants:
    """Inconsistent combinations are rejected at construction"""

    def test_empty_defaults(self):
        field = FieldValue.empty()
        assert field.value is None
        assert field.confidence == 0
        assert field.source == FieldSource.PENDING

    def test_empty_value_with_confidence(self):
        with pytest.raises(ValidationError):
            FieldValue(value=None, confidence=0.5)

    def test_inferred_below_threshold(self):
        with pytest.raises(ValidationError):
            FieldValue(value="x", confidence=0.5, source=FieldSource.INFERRED)

    def test_pending_above_threshold(self):
        with pytest.raises(ValidationError):
            FieldValue(value="x", confidence=0.9, source=FieldSource.PENDING)

    @pytest.mark.parametrize("confidence", [0.0, 0.5, 0.9])
    def test_confirmed_below_full_confidence(self, confidence):
        with pytest.raises(ValidationError):
            FieldValue(value="x", confidence=confidence, source=FieldSource.CONFIRMED)

    def test_confidence_out_of_range(self):
        with pytest.raises(ValidationError):
            FieldValue(value="x", confidence=1.2, source=FieldSource.INFERRED)

    def test_frozen(self):
        field = FieldValue.scored("x", 0.9)
        with pytest.raises(ValidationError):
            field.confidence = 0.1


def test_confirmed():
    field = FieldValue.confirmed("linkedin")

    assert field.confidence == 1.0
    assert field.source == FieldSource.CONFIRMED
    assert field.inferred_from == "user"
    assert field.is_known
