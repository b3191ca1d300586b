import functools
import logging
import traceback

from stocknotifier.util import aws


def log_exceptions(func):
    """
    Logs any exception raised by ``func`` and posts the traceback to the
    exception SNS topic before re-raising it.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logging.error(
                f"Exception {e} thrown during {func.__name__}",
                exc_info=e
            )
            message = (f"Exception encountered during {func.__name__}"
                       f"\n\n\n{traceback.format_exc()}")
            try:
                aws.post_exception_to_sns(message)
            except Exception as alert_error:
                logging.error(f"Could not post exception alert: {alert_error}")
            raise

    return wrapper
