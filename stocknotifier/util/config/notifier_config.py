import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from stocknotifier.util.constants.aws import LOW_STOCK_TOPIC_ARN_ENV_KEY
from stocknotifier.util.constants.inventory import DEFAULT_LOW_STOCK_THRESHOLD
from stocknotifier.util.constants.inventory import THRESHOLD_ENV_KEY
from stocknotifier.util.constants.shopify import API_KEY_ENV_KEY
from stocknotifier.util.constants.shopify import API_PASSWORD_ENV_KEY
from stocknotifier.util.constants.shopify import API_VERSION
from stocknotifier.util.constants.shopify import DEFAULT_REQUEST_TIMEOUT
from stocknotifier.util.constants.shopify import DOMAIN_ENV_KEY
from stocknotifier.util.constants.shopify import REQUEST_TIMEOUT_ENV_KEY
from stocknotifier.util.exceptions import ConfigurationError
from stocknotifier.util.exceptions import MissingConfigurationError

REQUIRED_ENV_KEYS = [
    API_KEY_ENV_KEY,
    API_PASSWORD_ENV_KEY,
    DOMAIN_ENV_KEY,
    LOW_STOCK_TOPIC_ARN_ENV_KEY,
]


@dataclass(frozen=True)
class NotifierConfig:
    shopify_api_key: str
    shopify_api_password: str
    shopify_domain: str
    topic_arn: str
    threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    api_version: str = API_VERSION
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None):
        """
        Builds the configuration from environment variables, validating it
        once up front so that nothing touches the network when a value is
        missing.

        :param environ: mapping to read from, defaults to ``os.environ``
            after loading any ``.env`` file
        :return: validated configuration
        :raises MissingConfigurationError: if a required value is absent
        :raises ConfigurationError: if an optional value cannot be parsed
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        missing = [key for key in REQUIRED_ENV_KEYS if not environ.get(key)]
        if missing:
            raise MissingConfigurationError(missing)

        return cls(
            shopify_api_key=environ[API_KEY_ENV_KEY],
            shopify_api_password=environ[API_PASSWORD_ENV_KEY],
            shopify_domain=environ[DOMAIN_ENV_KEY],
            topic_arn=environ[LOW_STOCK_TOPIC_ARN_ENV_KEY],
            threshold=_parse_optional(environ, THRESHOLD_ENV_KEY, int,
                                      DEFAULT_LOW_STOCK_THRESHOLD),
            request_timeout=_parse_optional(environ, REQUEST_TIMEOUT_ENV_KEY,
                                            float, DEFAULT_REQUEST_TIMEOUT),
        )


def _parse_optional(environ: Mapping[str, str], key: str, type_, default):
    raw = environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return type_(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{key} must be a valid {type_.__name__}, got {raw!r}") from e
