"""Access gate for detail views (full paper, citation tree)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from loguru import logger

T = TypeVar("T")

AUTH_REQUIRED = "authentication_required"


@dataclass(frozen=True, slots=True)
class GateDecision:
    allowed: bool
    value: Any = None
    reason: Optional[str] = None


class AccessGate:
    def view_detail(self, is_authenticated: bool, action: Callable[..., T], *args: Any, **kwargs: Any) -> GateDecision:
        if not is_authenticated:
            logger.debug("detail view deflected: {}", getattr(action, "__name__", action))
            return GateDecision(allowed=False, reason=AUTH_REQUIRED)
        return GateDecision(allowed=True, value=action(*args, **kwargs))


access_gate = AccessGate()
