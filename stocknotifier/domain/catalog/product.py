from dataclasses import dataclass, field
from typing import Any

from dacite import from_dict

from stocknotifier.domain.catalog.variant import Variant
from stocknotifier.util.constants.shopify import VARIANTS_KEY


@dataclass
class Product:
    variants: list[Variant] = field(default_factory=list)
    id: Any = None
    title: Any = None

    @classmethod
    def header_from_payload(cls, payload: dict) -> "Product":
        """Validates the product's own fields, leaving variants empty."""
        if not isinstance(payload, dict):
            raise ValueError(f"product must be an object, "
                             f"got {type(payload).__name__}")
        if not isinstance(payload.get(VARIANTS_KEY), list):
            raise ValueError(f"product has no '{VARIANTS_KEY}' list")
        return from_dict(data_class=cls,
                         data={**payload, VARIANTS_KEY: []})
