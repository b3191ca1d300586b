from stocknotifier.domain.catalog.catalog import Catalog
from stocknotifier.domain.catalog.catalog import SkippedEntry
from stocknotifier.domain.catalog.product import Product
from stocknotifier.domain.catalog.variant import Variant
