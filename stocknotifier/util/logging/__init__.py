import logging
import sys
from datetime import date

import watchtower

from stocknotifier.util.aws import boto3_session
from stocknotifier.util.constants.aws import DEFAULT_REGION
from stocknotifier.util.constants.aws import LOG_GROUP_NAME
from stocknotifier.util.constants.aws import LOGS_SERVICE_NAME
from stocknotifier.util.logging.JsonLogFormatter import JsonLogFormatter
from stocknotifier.util.logging.sns_exception_logging_decorator import \
    log_exceptions


def _setup_json_handler(handler):
    handler.setFormatter(JsonLogFormatter())
    return handler


def set_up_logging(cloudwatch: bool = True):
    handlers = [_setup_json_handler(logging.StreamHandler(sys.stdout))]
    if cloudwatch:
        handlers.append(_setup_json_handler(
            watchtower.CloudWatchLogHandler(
                boto3_client=boto3_session.client(
                    LOGS_SERVICE_NAME,
                    region_name=DEFAULT_REGION
                ),
                log_group_name=LOG_GROUP_NAME,
                log_stream_name=f"application."
                                f"{date.today().isoformat()}.log"
            )
        ))

    # Lambda installs its own root handler, so replace rather than append
    logging.basicConfig(handlers=handlers, level=logging.INFO, force=True)

    logging.info("Logging with JSON formatting is active.")
