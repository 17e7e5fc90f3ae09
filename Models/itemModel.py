import json
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Item:
    id: int
    name: str
    description: str
    price: Decimal

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 1:
            raise ValueError(f"Item id must be a positive integer, got {self.id!r}")
        if not self.name:
            raise ValueError("Item name must not be empty")
        if not self.description:
            raise ValueError("Item description must not be empty")
        price = Decimal(str(self.price)).quantize(CENTS, rounding=ROUND_HALF_UP)
        if price < 0:
            raise ValueError(f"Item price must not be negative, got {price}")
        # frozen dataclass: bypass __setattr__ to store the normalised price
        object.__setattr__(self, "price", price)

    def to_json(self) -> str:
        """Render the item as a JSON object with the price as a 2-decimal number."""
        return (
            "{\n"
            f'    "id": {self.id},\n'
            f'    "name": {json.dumps(self.name)},\n'
            f'    "description": {json.dumps(self.description)},\n'
            f'    "price": {self.price:.2f}\n'
            "}"
        )
