import os

# Region
DEFAULT_REGION = "us-east-1"

# Credentials
SESSION_PARAMETERS = {
    "region_name": DEFAULT_REGION,
    "aws_access_key_id": os.getenv("AWS-ACCESS-KEY"),
    "aws_secret_access_key": os.getenv("AWS-SECRET-KEY")
}

# SNS
SNS_SERVICE_NAME = "sns"
SNS_MESSAGE_ID_KEY = "MessageId"
LOW_STOCK_TOPIC_ARN_ENV_KEY = "LOW_STOCK_TOPIC_ARN"
SNS_EXCEPTION_TOPIC_ARN = os.getenv("EXCEPTION_TOPIC_ARN")
SNS_EXCEPTION_SUBJECT = "StockNotifier Encountered an Error"

# CloudWatch
LOGS_SERVICE_NAME = "logs"
LOG_GROUP_NAME = "/ext/lambda/StockNotifierService"
