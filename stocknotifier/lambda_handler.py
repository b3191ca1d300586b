import logging

from stocknotifier.services import LowStockNotificationService
from stocknotifier.util.config import NotifierConfig
from stocknotifier.util.logging import log_exceptions
from stocknotifier.util.logging import set_up_logging


@log_exceptions
def lambda_handler(event, context):
    """
    Scheduled entry point. The event payload is ignored; any configuration,
    fetch or catalog format error propagates so the invocation is recorded
    as failed.
    """
    set_up_logging(cloudwatch=False)
    logging.info("Low stock check triggered")

    config = NotifierConfig.from_env()
    report = LowStockNotificationService(config).run()
    return report.to_dict()
