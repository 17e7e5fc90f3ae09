import random
from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from Models.itemModel import Item

ADJECTIVES = [
    "Vintage", "Wireless", "Smart", "Organic", "Ergonomic",
    "Heavy-Duty", "Portable", "Solar-Powered", "Luxury", "Digital",
]

NOUNS = [
    "Headphones", "Coffee Maker", "Running Shoes", "Desk Lamp", "Backpack",
    "Wristwatch", "Blender", "Gaming Mouse", "Yoga Mat", "Keyboard",
]

DESCRIPTORS = [
    "Perfect for daily use.", "A reliable choice for professionals.",
    "Limited edition color.", "Top-rated by customers.", "Includes a 2-year warranty.",
]

MIN_PRICE = 10.00
PRICE_SPREAD = 490.00


class Catalog(Mapping):
    """Read-only id -> Item mapping. Built once, never mutated."""

    def __init__(self, items):
        data = {}
        for item in items:
            if item.id in data:
                raise ValueError(f"Duplicate item id: {item.id}")
            data[item.id] = item
        self._items = MappingProxyType(data)

    def __getitem__(self, item_id):
        return self._items[item_id]

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    @property
    def max_id(self) -> int:
        return max(self._items, default=0)

    def __repr__(self):
        return f"<Catalog items={len(self)}>"


def populate_catalog(count: int = 50, seed=None) -> Catalog:
    """Generate `count` mock items with ids 1..count.

    Names are deterministic; price and description are sampled, so pass a
    seed when a reproducible catalog is needed.
    """
    if count < 1:
        raise ValueError("Catalog needs at least one item")

    rng = random.Random(seed)
    items = []
    for counter in range(1, count + 1):
        name = f"{ADJECTIVES[counter % len(ADJECTIVES)]} {NOUNS[(counter - 1) % len(NOUNS)]}"
        price = Decimal(str(round(MIN_PRICE + PRICE_SPREAD * rng.random(), 2)))
        description = rng.choice(DESCRIPTORS)
        items.append(Item(id=counter, name=name, description=description, price=price))

    return Catalog(items)
