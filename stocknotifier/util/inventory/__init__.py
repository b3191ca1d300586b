from stocknotifier.util.inventory.low_stock_util import \
    build_notification_message
from stocknotifier.util.inventory.low_stock_util import find_low_stock_skus
