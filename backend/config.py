import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")


def _get_int(name: str, fallback: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return fallback
    try:
        return int(raw_value)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable {name} must be an integer, got {raw_value!r}") from exc


def _get_bool(name: str, fallback: bool) -> bool:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return fallback
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(name: str, fallback: str = "") -> List[str]:
    raw_value = os.getenv(name, fallback)
    if not raw_value:
        return []
    return [item.strip() for item in raw_value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    inventory_level: int = _get_int("INVENTORY_LEVEL", 0)
    payment_sandbox_approve: bool = _get_bool("PAYMENT_SANDBOX_APPROVE", True)
    supabase_url: Optional[str] = os.getenv("SUPABASE_URL")
    supabase_service_role_key: Optional[str] = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
    order_status_table: str = os.getenv("ORDER_STATUS_TABLE", "order_status")
    allowed_origins: List[str] = field(
        default_factory=lambda: _get_list("ALLOWED_ORIGINS", "*")
    )

    @property
    def supabase_enabled(self) -> bool:
        return bool(self.supabase_url and self.supabase_service_role_key)


settings = Settings()
