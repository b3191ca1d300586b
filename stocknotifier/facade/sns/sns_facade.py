import logging

from botocore.exceptions import BotoCoreError
from botocore.exceptions import ClientError

from stocknotifier.domain.notification import PublishResult
from stocknotifier.util.aws import boto3_session
from stocknotifier.util.constants.aws import DEFAULT_REGION
from stocknotifier.util.constants.aws import SNS_MESSAGE_ID_KEY
from stocknotifier.util.constants.aws import SNS_SERVICE_NAME

logger = logging.getLogger(__name__)


class SNSFacade:

    def __init__(self, topic_arn: str, client=None):
        self.topic_arn = topic_arn
        self._client = client or boto3_session.client(SNS_SERVICE_NAME,
                                                      DEFAULT_REGION)

    def publish(self, message: str) -> PublishResult:
        """
        Publishes ``message`` to the topic once. Failures are logged and
        returned rather than raised, so a failed delivery never fails the
        caller.

        :param message: message body
        :return: delivered result with the SNS message id, or failed result
            with the reason
        """
        try:
            response = self._client.publish(TopicArn=self.topic_arn,
                                            Message=message)
        except (BotoCoreError, ClientError) as e:
            logger.error(
                f"Exception {e} thrown publishing to {self.topic_arn}",
                exc_info=e
            )
            return PublishResult.failure(str(e))

        message_id = response.get(SNS_MESSAGE_ID_KEY)
        logger.info("Published message %s to %s", message_id, self.topic_arn)
        return PublishResult.success(message_id)
