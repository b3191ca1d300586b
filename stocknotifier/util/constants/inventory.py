THRESHOLD_ENV_KEY = "LOW_STOCK_THRESHOLD"

# Variants at or below this quantity are reported
DEFAULT_LOW_STOCK_THRESHOLD = 10

SKU_SEPARATOR = ","
