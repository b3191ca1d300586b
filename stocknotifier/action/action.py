import logging
import re
import traceback
from abc import ABC
from abc import abstractmethod

from flask import request

from stocknotifier.domain.generic.http_methods import HTTPMethods
from stocknotifier.util.aws import post_exception_to_sns
from stocknotifier.util.exceptions import InvalidRequestError


class Action(ABC):

    @property
    def route(self):
        name_ = self.__class__.__name__.replace("Action", "")
        name_ = re.sub(r'(?<!^)(?=[A-Z])', '-', name_).lower()
        return name_

    def trigger(self, request_: request):
        logging.info(f"Executing {self.route} due to request {request_}")
        try:
            return self.run(request_)
        except InvalidRequestError:
            raise
        except Exception as e:
            logging.error(
                f"Exception {e} thrown during {self.route} execution",
                exc_info=e
            )
            exception = traceback.format_exc()
            message = (f"Exception encountered during "
                       f"{self.__class__.__name__}\n\n\n{exception}")
            try:
                post_exception_to_sns(message)
            except Exception as alert_error:
                logging.error(f"Could not post exception alert: {alert_error}")
            raise

    @property
    def method(self):
        return HTTPMethods.GET.value

    def _get_args(self, request_: request):
        return request_.args.to_dict()

    @abstractmethod
    def run(self, request_: request):
        pass
