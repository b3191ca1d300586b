from stocknotifier.domain.catalog import Catalog
from stocknotifier.util.constants.inventory import DEFAULT_LOW_STOCK_THRESHOLD
from stocknotifier.util.constants.inventory import SKU_SEPARATOR


def find_low_stock_skus(catalog: Catalog,
                        threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
                        ) -> list[str]:
    """
    Returns the SKUs whose inventory quantity is at or below ``threshold``,
    in document order and without deduplication.
    """
    return [variant.sku for variant in catalog.variants
            if variant.inventory_quantity <= threshold]


def build_notification_message(skus: list[str]) -> str:
    return SKU_SEPARATOR.join(skus)
