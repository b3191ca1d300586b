class NotifierError(Exception):
    """Base class for errors that abort a low stock run."""


class ConfigurationError(NotifierError):
    pass


class MissingConfigurationError(ConfigurationError):

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Missing required configuration: {', '.join(missing)}")


class CatalogFetchError(NotifierError):
    pass


class CatalogFormatError(NotifierError):
    pass


class InvalidRequestError(NotifierError):
    """Raised for bad caller input; reported as a 400 without an alert."""
