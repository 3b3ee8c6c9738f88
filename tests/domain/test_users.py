"""Tests for the users domain."""

import pytest

from solidkit.domain.base import ContractViolationError, OperationFailedError
from solidkit.domain.users import (
    MySqlRecordStore,
    PostgresRecordStore,
    RecordStore,
    TaggedUserCreator,
    UserCreator,
)


class TestRecordStores:
    """Test cases for the record store variants."""

    @pytest.mark.parametrize("store, expected", [
        (MySqlRecordStore(), "mysql:alice"),
        (PostgresRecordStore(), "postgres:alice"),
    ])
    def test_save_marks_engine(self, store, expected):
        """Test that each store marks its engine."""
        assert isinstance(store, RecordStore)
        assert store.save("alice") == expected

    def test_empty_record_fails(self):
        """Test that an empty record is an operation failure."""
        with pytest.raises(OperationFailedError) as exc_info:
            MySqlRecordStore().save("")

        assert exc_info.value.operation == "save"


class TestTaggedUserCreator:
    """Test cases for the tag-selected user creator."""

    def test_selects_engine_from_tag(self):
        """Test that the tagged creator picks its engine from a tag."""
        assert TaggedUserCreator("mysql").create("alice") == "mysql:alice"
        assert TaggedUserCreator("postgres").create("alice") == "postgres:alice"

    def test_unknown_engine_needs_a_code_change(self):
        """Test that a new engine needs a code change."""
        with pytest.raises(ValueError, match="Unsupported database type: sqlite"):
            TaggedUserCreator("sqlite")


class TestUserCreator:
    """Test cases for UserCreator."""

    def test_create_with_injected_store(self):
        """Test creating a user through an injected store."""
        assert UserCreator(MySqlRecordStore()).create("alice") == "mysql:alice"
        assert UserCreator(PostgresRecordStore()).create("alice") == "postgres:alice"

    def test_create_strips_whitespace(self):
        """Test that usernames are stripped."""
        assert UserCreator(MySqlRecordStore()).create("  alice ") == "mysql:alice"

    def test_blank_username_fails_before_store(self):
        """Test that a blank username fails before reaching the store."""
        store = MySqlRecordStore()

        with pytest.raises(OperationFailedError) as exc_info:
            UserCreator(store).create("   ")

        assert exc_info.value.operation == "create"

    def test_store_failure_propagates(self):
        """Test that a store failure reaches the caller."""
        class BrokenStore(RecordStore):
            def save(self, record):
                raise OperationFailedError("save", "disk full")

        with pytest.raises(OperationFailedError, match="save failed: disk full"):
            UserCreator(BrokenStore()).create("alice")

    def test_rejects_non_store(self):
        """Test that a non-store dependency is refused."""
        with pytest.raises(ContractViolationError):
            UserCreator(TaggedUserCreator("mysql"))
