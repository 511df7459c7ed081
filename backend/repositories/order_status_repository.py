from typing import Any, Dict, List, Tuple

from supabase import Client

ORDER_STATUS_TABLE = "order_status"


class InMemoryOrderStatusStore:
    def __init__(self) -> None:
        self.writes: List[Tuple[int, str]] = []

    def update_order_status(self, order_id: int, status: str) -> None:
        self.writes.append((order_id, status))


class SupabaseOrderStatusStore:
    def __init__(self, client: Client, table: str = ORDER_STATUS_TABLE) -> None:
        self.client = client
        self.table = table

    def update_order_status(self, order_id: int, status: str) -> None:
        record: Dict[str, Any] = {"order_id": order_id, "status": status}
        self.client.table(self.table).upsert(record).execute()
