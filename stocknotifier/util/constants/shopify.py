# Environment keys
API_KEY_ENV_KEY = "SHOPIFY_API_KEY"
API_PASSWORD_ENV_KEY = "SHOPIFY_API_PASSWORD"
DOMAIN_ENV_KEY = "SHOPIFY_DOMAIN"
REQUEST_TIMEOUT_ENV_KEY = "SHOPIFY_REQUEST_TIMEOUT"

# Admin REST API
API_VERSION = "2022-04"
BASE_URL_TEMPLATE = ("https://{api_key}:{password}@{domain}.myshopify.com"
                     "/admin/api/{version}/")
PRODUCTS_ENDPOINT = "products.json"
PRODUCTS_PAGE_LIMIT = 250
DEFAULT_REQUEST_TIMEOUT = 30.0

# Payload keys
PRODUCTS_KEY = "products"
VARIANTS_KEY = "variants"
SKU_KEY = "sku"
LEGACY_SKU_KEY = "SKU"
NEXT_LINK_KEY = "next"
URL_KEY = "url"
