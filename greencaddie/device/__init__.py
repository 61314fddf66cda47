from .location import (
    LocationProvider,
    PositionDenied,
    PositionFix,
    PositionOutcome,
    PositionPermissionError,
    PositionTimedOut,
    PositionUnavailableError,
    request_position_fix,
)

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
