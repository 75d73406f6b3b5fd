# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pyezlist (logging, telemetry).
#
# ---------------------------------------------------------------------------

from __future__ import annotations

from .logging import init_logging, get_app_logger
from .telemetry import init_telemetry, get_telemetry

__all__ = [
	"get_app_logger",
	"init_logging",
	"init_telemetry",
	"get_telemetry",
]
