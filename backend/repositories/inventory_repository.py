class StaticInventory:
    """Inventory source reporting a fixed level, taken from settings by default."""

    def __init__(self, level: int) -> None:
        self.level = level

    def available_quantity(self) -> int:
        return self.level
