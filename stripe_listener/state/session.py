"""Session returned by the session authorization endpoint."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True, slots=True)
class Session:
    reconnect_delay: int
    secret: str
    websocket_authorized_feature: str
    websocket_id: str
    websocket_url: str
    default_version: str
    latest_version: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Session:
        delay = data.get("reconnect_delay")
        return cls(
            reconnect_delay=delay if isinstance(delay, int) and not isinstance(delay, bool) else 0,
            secret=_as_str(data.get("secret")),
            websocket_authorized_feature=_as_str(data.get("websocket_authorized_feature")),
            websocket_id=_as_str(data.get("websocket_id")),
            websocket_url=_as_str(data.get("websocket_url")),
            default_version=_as_str(data.get("default_version")),
            latest_version=_as_str(data.get("latest_version")),
        )


__all__ = ["Session"]
