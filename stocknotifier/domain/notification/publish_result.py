from dataclasses import dataclass
from enum import Enum


class PublishStatus(str, Enum):
    DELIVERED = "DELIVERED"
    FAILED = "FAILED"


@dataclass
class PublishResult:
    status: PublishStatus
    message_id: str | None = None
    reason: str | None = None

    @property
    def delivered(self) -> bool:
        return self.status == PublishStatus.DELIVERED

    @classmethod
    def success(cls, message_id: str | None) -> "PublishResult":
        return cls(PublishStatus.DELIVERED, message_id=message_id)

    @classmethod
    def failure(cls, reason: str) -> "PublishResult":
        return cls(PublishStatus.FAILED, reason=reason)
