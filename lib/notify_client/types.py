"""Shapes returned by the notification service.

The client passes response bodies through untouched; these helpers are for
callers that want typed access to a subscription record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SubscriptionRecord:
    """A subject's subscription to one or more resources of a type."""

    resource_type: str
    subject: str
    resource_ids: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SubscriptionRecord":
        """Create from API response dict."""
        ids = data.get("resourceIds") or []
        if isinstance(ids, str):
            ids = [ids]
        return cls(
            resource_type=str(data.get("resourceType") or ""),
            subject=str(data.get("subject") or ""),
            resource_ids=[str(i) for i in ids],
        )


def looks_like_subscription(data: Any) -> bool:
    return isinstance(data, dict) and "resourceType" in data and "subject" in data
