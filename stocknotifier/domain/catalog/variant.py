from dataclasses import dataclass
from typing import Any

from dacite import from_dict

from stocknotifier.util.constants.shopify import LEGACY_SKU_KEY
from stocknotifier.util.constants.shopify import SKU_KEY


@dataclass
class Variant:
    sku: str
    inventory_quantity: int | float
    # Metadata only, never validated
    id: Any = None
    title: Any = None

    def __post_init__(self):
        # bool is an int subclass and would otherwise pass as a quantity
        if isinstance(self.inventory_quantity, bool):
            raise ValueError("inventory_quantity must be numeric, "
                             f"got {self.inventory_quantity!r}")

    @classmethod
    def from_payload(cls, payload: dict) -> "Variant":
        if not isinstance(payload, dict):
            raise ValueError(f"variant must be an object, "
                             f"got {type(payload).__name__}")
        data = dict(payload)
        if data.get(SKU_KEY) is None and LEGACY_SKU_KEY in data:
            data[SKU_KEY] = data[LEGACY_SKU_KEY]
        return from_dict(data_class=cls, data=data)
