# -*- coding: utf-8 -*-
"""
Tests for the Field Store.

Tests cover:
- Defaults and empty sentinels
- Unknown field handling
- Snapshot immutability
- Tag toggling and normalization
- Draft serialization
"""

import pytest

from models.location import ReportLocation
from services.disaster_report.schema import build_report_schema
from services.wizard.field_store import FieldKind, FieldSchema, FieldSpec, FieldStore, is_empty


@pytest.fixture
def store():
    """Create an empty report field store."""
    return FieldStore(build_report_schema())


class TestIsEmpty:
    """Test the "not provided" rule."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\n\t", (), [], False])
    def test_empty_values(self, value):
        assert is_empty(value) is True

    @pytest.mark.parametrize("value", ["x", " a ", 0, 0.0, ("Other",), True])
    def test_non_empty_values(self, value):
        assert is_empty(value) is False


class TestFieldStore:
    """Test value storage."""

    def test_every_schema_field_has_a_value(self, store):
        snapshot = store.snapshot()
        assert set(snapshot) == set(store.schema.names)
        assert snapshot["description"] == ""
        assert snapshot["impactType"] == ()
        assert snapshot["location"] is None
        assert snapshot["isEmergency"] is False

    def test_set_and_get(self, store):
        store.set("description", "Bridge collapsed")
        assert store.get("description") == "Bridge collapsed"

    def test_set_does_not_validate(self, store):
        """Short or odd values are stored as typed."""
        store.set("description", "x")
        store.set("severity", "not-a-level")
        assert store.get("description") == "x"
        assert store.get("severity") == "not-a-level"

    def test_unknown_field_raises(self, store):
        with pytest.raises(KeyError):
            store.set("disasterTyp", "Flood")
        with pytest.raises(KeyError):
            store.get("nope")

    def test_duplicate_schema_field_rejected(self):
        with pytest.raises(ValueError):
            FieldSchema([FieldSpec("a"), FieldSpec("a")])

    def test_snapshot_is_read_only(self, store):
        snapshot = store.snapshot()
        with pytest.raises(TypeError):
            snapshot["description"] = "changed"

    def test_snapshot_is_detached_from_later_writes(self, store):
        store.set("description", "before")
        snapshot = store.snapshot()
        store.set("description", "after")
        assert snapshot["description"] == "before"

    def test_toggle_tag(self, store):
        store.toggle_tag("impactType", "Property Damage")
        store.toggle_tag("impactType", "Other")
        assert store.get("impactType") == ("Property Damage", "Other")

        store.toggle_tag("impactType", "Property Damage")
        assert store.get("impactType") == ("Other",)

    def test_tags_are_deduplicated_in_order(self, store):
        store.set("assistanceNeeded", ["Transportation", "Food & Water", "Transportation"])
        assert store.get("assistanceNeeded") == ("Transportation", "Food & Water")

    def test_location_dict_is_normalized(self, store):
        store.set("location", {"address": "Old bridge", "lat": "36.1", "lng": 37.2})
        location = store.get("location")
        assert isinstance(location, ReportLocation)
        assert location.lat == pytest.approx(36.1)
        assert location.address == "Old bridge"

    def test_reset(self, store):
        store.set("description", "something")
        store.toggle_tag("impactType", "Other")
        store.reset()
        assert store.get("description") == ""
        assert store.get("impactType") == ()

    def test_to_dict_and_load(self, store):
        store.set("location", ReportLocation("Square", 1.5, 2.5))
        store.set("impactType", ("Other",))
        data = store.to_dict()
        assert data["location"] == {"address": "Square", "lat": 1.5, "lng": 2.5}
        assert data["impactType"] == ["Other"]

        restored = FieldStore(build_report_schema())
        restored.load(dict(data, legacyField="ignored"))
        assert restored.snapshot() == store.snapshot()

    def test_initial_values(self):
        schema = FieldSchema([FieldSpec("count", FieldKind.NUMBER)])
        store = FieldStore(schema, initial={"count": 0})
        assert store.get("count") == 0
