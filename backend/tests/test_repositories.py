"""Tests for the status store adapters."""
from unittest.mock import MagicMock

from repositories.order_status_repository import InMemoryOrderStatusStore, SupabaseOrderStatusStore


class TestInMemoryOrderStatusStore:
    def test_records_writes_in_order(self):
        store = InMemoryOrderStatusStore()
        store.update_order_status(1, "processed")
        store.update_order_status(1, "processed")
        store.update_order_status(2, "processed")
        assert store.writes == [(1, "processed"), (1, "processed"), (2, "processed")]


class TestSupabaseOrderStatusStore:
    def test_upserts_status_row(self):
        client = MagicMock()
        store = SupabaseOrderStatusStore(client, table="order_status")
        store.update_order_status(9, "processed")

        client.table.assert_called_once_with("order_status")
        client.table.return_value.upsert.assert_called_once_with({"order_id": 9, "status": "processed"})
        client.table.return_value.upsert.return_value.execute.assert_called_once_with()

    def test_defaults_to_order_status_table(self):
        client = MagicMock()
        SupabaseOrderStatusStore(client).update_order_status(3, "processed")
        client.table.assert_called_once_with("order_status")
