"""
Tests for the request guards
"""
from types import SimpleNamespace

import pytest

from stock_api.core.errors import Forbidden, NotFound
from stock_api.core.guards import handle_404, remove_blank_fields, require_ownership


class TestHandle404:
    """Tests for handle_404."""

    def test_passes_record_through(self):
        """Test that a found record is returned unchanged."""
        record = SimpleNamespace(id=1)

        assert handle_404(record) is record

    def test_missing_record_raises(self):
        """Test that None raises NotFound with resource and id."""
        with pytest.raises(NotFound) as excinfo:
            handle_404(None, "Stock", 42)

        assert excinfo.value.resource == "Stock"
        assert excinfo.value.identifier == 42
        assert "42" in excinfo.value.message

    def test_falsy_record_is_not_missing(self):
        """Test that only None counts as absent."""
        assert handle_404([]) == []


class TestRequireOwnership:
    """Tests for require_ownership."""

    def test_owner_passes(self):
        user = SimpleNamespace(id=7)
        record = SimpleNamespace(owner_id=7)

        assert require_ownership(user, record) is None

    def test_owner_given_as_plain_id(self):
        record = SimpleNamespace(owner_id=7)

        require_ownership(7, record)

    def test_non_owner_forbidden(self):
        user = SimpleNamespace(id=8)
        record = SimpleNamespace(owner_id=7)

        with pytest.raises(Forbidden):
            require_ownership(user, record)

    def test_record_without_owner_forbidden(self):
        """Test that an ownerless record can't be mutated by anyone."""
        with pytest.raises(Forbidden):
            require_ownership(SimpleNamespace(id=None), SimpleNamespace(owner_id=None))


class TestRemoveBlankFields:
    """Tests for remove_blank_fields."""

    def test_drops_empty_strings(self):
        payload = {"stock": {"title": "", "text": "foo"}}

        assert remove_blank_fields(payload) == {"stock": {"text": "foo"}}

    def test_keeps_non_string_and_falsy_values(self):
        payload = {"stock": {"count": 0, "flag": False, "note": None, "text": " "}}

        assert remove_blank_fields(payload) == payload

    def test_does_not_mutate_input(self):
        payload = {"stock": {"title": "", "text": "foo"}}

        remove_blank_fields(payload)

        assert payload == {"stock": {"title": "", "text": "foo"}}

    def test_non_mapping_values_pass_through(self):
        payload = {"stock": {"title": ""}, "page": "", "tags": ["", "a"]}

        assert remove_blank_fields(payload) == {"stock": {}, "page": "", "tags": ["", "a"]}

    def test_idempotent(self):
        payload = {"stock": {"title": "", "text": "sell", "owner": 3}, "other": {"x": ""}}

        once = remove_blank_fields(payload)

        assert remove_blank_fields(once) == once
