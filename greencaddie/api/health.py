import platform
import time
from typing import Any, Dict

from greencaddie import __version__
from greencaddie.config import get_settings


async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "version": __version__,
        "ts": time.time(),
        "env": {
            "distance_unit": get_settings().distance_unit,
        },
        "runtime": {
            "python": platform.python_version(),
        },
    }
