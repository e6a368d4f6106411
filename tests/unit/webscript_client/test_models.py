"""Unit tests for webscript_client.models module."""

import pytest

from src.webscript_client.models import (
    ChangeBatch,
    Cursor,
    DocumentRecord,
    MetadataRecord,
    UserAuthority,
)
from tests.fixtures.sample_responses import NODE_REF, NODE_UUID


class TestCursor:
    """Test cases for Cursor."""

    def test_initial_cursor_is_zero(self):
        cursor = Cursor()
        assert cursor.last_transaction_id == 0
        assert cursor.last_acl_changeset_id == 0

    def test_advance_takes_batch_values(self):
        batch = ChangeBatch(last_transaction_id=7, last_acl_changeset_id=3)
        assert Cursor().advance(batch) == Cursor(7, 3)

    def test_advance_adopts_lower_reported_values(self, caplog):
        """A reset or reindexed store resumes from what the repository reports."""
        batch = ChangeBatch(last_transaction_id=7, last_acl_changeset_id=3)

        with caplog.at_level("WARNING", logger="src.webscript_client.models"):
            cursor = Cursor(10, 5).advance(batch)

        assert cursor == Cursor(7, 3)
        assert "behind cursor 10" in caplog.text
        assert "behind cursor 5" in caplog.text

    def test_advance_forward_is_not_logged(self, caplog):
        batch = ChangeBatch(last_transaction_id=8, last_acl_changeset_id=4)

        with caplog.at_level("WARNING", logger="src.webscript_client.models"):
            cursor = Cursor(7, 3).advance(batch)

        assert cursor == Cursor(8, 4)
        assert caplog.text == ""

    def test_cursor_is_immutable(self):
        with pytest.raises(AttributeError):
            Cursor().last_transaction_id = 3


class TestDocumentRecord:
    """Test cases for DocumentRecord."""

    def test_known_fields_are_typed(self):
        record = DocumentRecord.from_json(
            {"uuid": NODE_UUID, "nodeRef": NODE_REF, "type": "cm:content", "name": "a.txt", "deleted": False},
            "SpacesStore",
            "workspace",
        )
        assert record.uuid == NODE_UUID
        assert record.node_ref == NODE_REF
        assert record.type == "cm:content"
        assert record.name == "a.txt"
        assert record.deleted is False
        assert record.extra == {}

    def test_unknown_fields_go_to_extra(self):
        record = DocumentRecord.from_json({"uuid": "u", "cm:title": "T", "size": 12})
        assert record.extra == {"cm:title": "T", "size": 12}

    def test_envelope_store_fields_override_document(self):
        record = DocumentRecord.from_json(
            {"uuid": "u", "store_id": "other", "storeProtocol": "archive"},
            "SpacesStore",
            "workspace",
        )
        assert record.store_id == "SpacesStore"
        assert record.store_protocol == "workspace"
        assert "storeProtocol" not in record.extra

    def test_non_object_yields_empty_record(self):
        record = DocumentRecord.from_json(["not", "an", "object"], "SpacesStore", "workspace")
        assert record.uuid is None
        assert record.extra == {}
        assert record.store_id == "SpacesStore"
        assert record.store_protocol == "workspace"

    def test_reads_as_mapping_with_wire_names(self):
        record = DocumentRecord.from_json({"uuid": "u", "nodeRef": "ref", "cm:title": "T"}, "s", "p")
        assert record["nodeRef"] == "ref"
        assert record["cm:title"] == "T"
        assert record["store_id"] == "s"
        assert record.get("name") is None
        assert dict(record) == {
            "uuid": "u",
            "nodeRef": "ref",
            "cm:title": "T",
            "store_id": "s",
            "store_protocol": "p",
        }

    def test_missing_key_raises_key_error(self):
        with pytest.raises(KeyError):
            DocumentRecord()["uuid"]

    @pytest.mark.parametrize("deleted,expected", [
        (True, True),
        (False, False),
        ("true", True),
        ("TRUE", True),
        ("false", False),
        (None, False),
    ])
    def test_is_deleted(self, deleted, expected):
        assert DocumentRecord(deleted=deleted).is_deleted is expected


class TestChangeBatch:
    """Test cases for ChangeBatch."""

    def test_cursor(self):
        assert ChangeBatch(last_transaction_id=7, last_acl_changeset_id=3).cursor == Cursor(7, 3)

    def test_node_ids_skip_documents_without_uuid(self):
        batch = ChangeBatch(documents=[DocumentRecord(uuid="a"), DocumentRecord(), DocumentRecord(uuid="b")])
        assert batch.node_ids == ["a", "b"]

    def test_len_counts_documents(self):
        assert len(ChangeBatch()) == 0
        assert len(ChangeBatch(documents=[DocumentRecord()])) == 1


class TestMetadataRecord:
    """Test cases for MetadataRecord."""

    def test_mapping_access(self):
        record = MetadataRecord("n1", {"cm:title": "Budget", "uuid": "n1"})
        assert record["cm:title"] == "Budget"
        assert len(record) == 2
        assert set(record) == {"cm:title", "uuid"}

    def test_known_field_accessors(self):
        record = MetadataRecord("n1", {"uuid": "n1", "nodeRef": "ref", "type": "cm:content", "name": "a"})
        assert record.uuid == "n1"
        assert record.node_ref == "ref"
        assert record.type == "cm:content"
        assert record.name == "a"

    def test_missing_accessors_are_none(self):
        record = MetadataRecord("n1")
        assert record.uuid is None
        assert record.name is None


class TestUserAuthority:
    """Test cases for UserAuthority."""

    def test_equality(self):
        assert UserAuthority("bob", ["g1", "g2"]) == UserAuthority(username="bob", authorities=["g1", "g2"])

    def test_authorities_default_to_empty(self):
        assert UserAuthority("bob").authorities == []
