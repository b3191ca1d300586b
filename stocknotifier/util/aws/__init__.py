import logging

import boto3

from stocknotifier.util.constants.aws import DEFAULT_REGION
from stocknotifier.util.constants.aws import SESSION_PARAMETERS
from stocknotifier.util.constants.aws import SNS_EXCEPTION_SUBJECT
from stocknotifier.util.constants.aws import SNS_EXCEPTION_TOPIC_ARN
from stocknotifier.util.constants.aws import SNS_SERVICE_NAME

boto3_session = boto3.Session(**SESSION_PARAMETERS)


def post_exception_to_sns(exception_message,
                          topic_arn: str | None = SNS_EXCEPTION_TOPIC_ARN):
    if not topic_arn:
        logging.warning("No exception topic configured, alert not sent")
        return
    sns = boto3_session.client(SNS_SERVICE_NAME, DEFAULT_REGION)
    sns.publish(TopicArn=topic_arn,
                Message=exception_message,
                Subject=SNS_EXCEPTION_SUBJECT)
