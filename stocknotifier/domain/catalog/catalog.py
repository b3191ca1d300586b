import logging
from dataclasses import dataclass, field

from dacite import DaciteError

from stocknotifier.domain.catalog.product import Product
from stocknotifier.domain.catalog.variant import Variant
from stocknotifier.util.constants.shopify import PRODUCTS_KEY
from stocknotifier.util.constants.shopify import VARIANTS_KEY

logger = logging.getLogger(__name__)


@dataclass
class SkippedEntry:
    location: str
    reason: str


@dataclass
class Catalog:
    products: list[Product] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)

    @property
    def variants(self) -> list[Variant]:
        return [variant for product in self.products
                for variant in product.variants]

    @classmethod
    def from_products(cls, raw_products: list) -> "Catalog":
        """
        Builds a typed catalog from the raw ``products`` list of a Shopify
        response. Products and variants that fail validation are recorded in
        ``skipped`` and left out; the rest keep their document order.

        :param raw_products: decoded ``products`` array
        :return: catalog of the entries that validated
        """
        catalog = cls()
        for p_index, raw_product in enumerate(raw_products):
            location = f"{PRODUCTS_KEY}[{p_index}]"
            try:
                product = Product.header_from_payload(raw_product)
            except (DaciteError, ValueError, TypeError) as e:
                catalog._skip(location, e)
                continue

            for v_index, raw_variant in enumerate(raw_product[VARIANTS_KEY]):
                try:
                    product.variants.append(Variant.from_payload(raw_variant))
                except (DaciteError, ValueError, TypeError) as e:
                    catalog._skip(f"{location}.{VARIANTS_KEY}[{v_index}]", e)
            catalog.products.append(product)
        return catalog

    def _skip(self, location: str, error: Exception):
        logger.warning("Skipping %s: %s", location, error)
        self.skipped.append(SkippedEntry(location, str(error)))
