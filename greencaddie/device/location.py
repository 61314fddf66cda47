"""Single-shot device position request.

One attempt, bounded by a timeout, with three terminal outcomes. Nothing here
retries; the manual tap path works regardless of the outcome. Cancel an
in-flight request by cancelling the task awaiting it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Literal, Optional, Protocol, Tuple, Union

from pydantic import BaseModel

from greencaddie.config import get_settings

logger = logging.getLogger("greencaddie.location")

DeniedReason = Literal["permission", "unavailable", "unsupported"]


class PositionPermissionError(Exception):
    """The user or platform refused access to the position sensor."""


class PositionUnavailableError(Exception):
    """The sensor could not produce a position."""


class LocationProvider(Protocol):
    async def current_position(self, *, high_accuracy: bool) -> Tuple[float, float]:
        """Return ``(latitude, longitude)`` in decimal degrees."""
        ...


class PositionFix(BaseModel):
    kind: Literal["fix"] = "fix"
    latitude: float
    longitude: float


class PositionDenied(BaseModel):
    kind: Literal["denied"] = "denied"
    reason: DeniedReason
    detail: Optional[str] = None


class PositionTimedOut(BaseModel):
    kind: Literal["timed_out"] = "timed_out"
    timeout_s: float


PositionOutcome = Union[PositionFix, PositionDenied, PositionTimedOut]


async def request_position_fix(
    provider: Optional[LocationProvider],
    *,
    timeout_s: Optional[float] = None,
    high_accuracy: bool = True,
) -> PositionOutcome:
    if provider is None:
        return PositionDenied(reason="unsupported")

    limit = timeout_s if timeout_s is not None else get_settings().position_timeout_s
    try:
        latitude, longitude = await asyncio.wait_for(
            provider.current_position(high_accuracy=high_accuracy), timeout=limit
        )
    except asyncio.TimeoutError:
        logger.info("position_fix_timeout", extra={"timeout_s": limit})
        return PositionTimedOut(timeout_s=limit)
    except PositionPermissionError as exc:
        logger.info("position_fix_denied", extra={"reason": "permission"})
        return PositionDenied(reason="permission", detail=str(exc) or None)
    except PositionUnavailableError as exc:
        logger.warning("position_fix_unavailable", extra={"detail": str(exc)})
        return PositionDenied(reason="unavailable", detail=str(exc) or None)

    return PositionFix(latitude=latitude, longitude=longitude)


__all__ = [
    "LocationProvider",
    "PositionDenied",
    "PositionFix",
    "PositionOutcome",
    "PositionPermissionError",
    "PositionTimedOut",
    "PositionUnavailableError",
    "request_position_fix",
]
