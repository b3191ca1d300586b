from stocknotifier.domain.catalog import SkippedEntry
from stocknotifier.domain.notification import (
    NotificationReport,
    PublishResult,
    PublishStatus,
)


def test_publish_result_constructors():
    delivered = PublishResult.success("msg-1")
    failed = PublishResult.failure("throttled")

    assert delivered.status == PublishStatus.DELIVERED
    assert delivered.delivered
    assert delivered.message_id == "msg-1"
    assert failed.status == PublishStatus.FAILED
    assert not failed.delivered
    assert failed.reason == "throttled"


def test_report_notified_reflects_publish_outcome():
    assert not NotificationReport(threshold=10).notified
    assert not NotificationReport(
        threshold=10, publish_result=PublishResult.failure("x")).notified
    assert NotificationReport(
        threshold=10, publish_result=PublishResult.success("id")).notified


def test_report_to_dict():
    report = NotificationReport(
        threshold=10,
        low_stock_skus=["A", "B"],
        skipped=[SkippedEntry("products[0]", "bad")],
        publish_result=PublishResult.success("id-1"),
    )

    assert report.to_dict() == {
        "threshold": 10,
        "low_stock_skus": ["A", "B"],
        "skipped": [{"location": "products[0]", "reason": "bad"}],
        "publish_result": {
            "status": "DELIVERED",
            "message_id": "id-1",
            "reason": None,
        },
    }
