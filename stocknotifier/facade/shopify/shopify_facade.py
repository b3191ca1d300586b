import logging

import requests
from requests import JSONDecodeError
from requests import RequestException

from stocknotifier.domain.generic.http_methods import HTTPMethods
from stocknotifier.util.config import NotifierConfig
from stocknotifier.util.constants.shopify import BASE_URL_TEMPLATE
from stocknotifier.util.constants.shopify import NEXT_LINK_KEY
from stocknotifier.util.constants.shopify import PRODUCTS_ENDPOINT
from stocknotifier.util.constants.shopify import PRODUCTS_KEY
from stocknotifier.util.constants.shopify import PRODUCTS_PAGE_LIMIT
from stocknotifier.util.constants.shopify import URL_KEY
from stocknotifier.util.exceptions import CatalogFetchError
from stocknotifier.util.exceptions import CatalogFormatError

logger = logging.getLogger(__name__)


class ShopifyFacade:

    def __init__(self, config: NotifierConfig):
        """Initializes the base request url from the store credentials"""
        self._api_key = config.shopify_api_key
        self._password = config.shopify_api_password
        self.domain = config.shopify_domain
        self.version = config.api_version
        self.timeout = config.request_timeout
        self.base_request = self.format_endpoint()

    def format_endpoint(self) -> str:
        return BASE_URL_TEMPLATE.format(api_key=self._api_key,
                                        password=self._password,
                                        domain=self.domain,
                                        version=self.version)

    def get_products(self) -> list:
        """
        Returns every raw product entry in the store, following the
        ``rel="next"`` Link header across pages.

        :raises CatalogFetchError: on a transport error or non-2xx status
        :raises CatalogFormatError: if a page is not JSON with a products list
        """
        products = []
        url = self.base_request + PRODUCTS_ENDPOINT
        params = {"limit": PRODUCTS_PAGE_LIMIT}
        page = 1
        while url:
            response = self._request(url, params=params)
            page_products = self._extract_products(response, page)
            products.extend(page_products)
            logger.debug("Fetched %s products from page %s of %s",
                         len(page_products), page, self.domain)

            # The next link already carries the page_info cursor
            url = response.links.get(NEXT_LINK_KEY, {}).get(URL_KEY)
            params = None
            page += 1
        logger.info("Fetched %s products from %s", len(products), self.domain)
        return products

    def _request(self, url: str, params: dict | None = None,
                 method: HTTPMethods = HTTPMethods.GET):
        try:
            response = requests.request(
                method=method.value,
                url=url,
                params=params,
                auth=(self._api_key, self._password),
                timeout=self.timeout
            )
        except RequestException as e:
            # The request url embeds credentials, so only the type is kept
            logger.error("Request to %s failed with %s", self.domain,
                         type(e).__name__)
            raise CatalogFetchError(
                f"Could not reach {self.domain}: {type(e).__name__}") from None

        if not response.ok:
            logger.error("Request to %s returned status %s", self.domain,
                         response.status_code)
            raise CatalogFetchError(
                f"{self.domain} returned HTTP {response.status_code}")
        return response

    def _extract_products(self, response, page: int) -> list:
        try:
            payload = response.json()
        except JSONDecodeError as e:
            logger.debug("Undecodable response body: %s", response.text)
            raise CatalogFormatError(
                f"Page {page} from {self.domain} is not valid JSON") from e

        if not isinstance(payload, dict) or \
                not isinstance(payload.get(PRODUCTS_KEY), list):
            raise CatalogFormatError(
                f"Page {page} from {self.domain} has no "
                f"'{PRODUCTS_KEY}' list")
        return payload[PRODUCTS_KEY]
