from stocknotifier.domain.notification.notification_report import \
    NotificationReport
from stocknotifier.domain.notification.publish_result import PublishResult
from stocknotifier.domain.notification.publish_result import PublishStatus
