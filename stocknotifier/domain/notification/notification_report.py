import dataclasses
from dataclasses import dataclass, field

from stocknotifier.domain.catalog import SkippedEntry
from stocknotifier.domain.notification.publish_result import PublishResult


@dataclass
class NotificationReport:
    threshold: int
    low_stock_skus: list[str] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)
    publish_result: PublishResult | None = None

    @property
    def notified(self) -> bool:
        return bool(self.publish_result and self.publish_result.delivered)

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)
