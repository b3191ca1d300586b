from dataclasses import dataclass

from flask import request

from stocknotifier.action.action import Action
from stocknotifier.domain.generic.http_methods import HTTPMethods
from stocknotifier.services import LowStockNotificationService
from stocknotifier.util.config import NotifierConfig
from stocknotifier.util.exceptions import InvalidRequestError

THRESHOLD_ARG = "threshold"


@dataclass
class LowStockNotifyAction(Action):
    service: LowStockNotificationService = None

    @property
    def method(self):
        return HTTPMethods.POST.value

    def run(self, request_: request):
        threshold = self._get_args(request_).get(THRESHOLD_ARG)
        if threshold is not None:
            try:
                threshold = int(threshold)
            except ValueError as e:
                raise InvalidRequestError(
                    f"{THRESHOLD_ARG} must be an integer, "
                    f"got {threshold!r}") from e
        service = self.service or LowStockNotificationService(
            NotifierConfig.from_env())
        return service.run(threshold=threshold).to_dict()
