"""Per-connection listener state."""

from __future__ import annotations

import asyncio
from typing import Any
from dataclasses import field, dataclass

from .session import Session


@dataclass(slots=True)
class ListenerState:
    session: Session | None = None
    ws: Any = None
    write_lock: asyncio.Lock = field(default_factory=asyncio.Lock)


__all__ = ["ListenerState"]
