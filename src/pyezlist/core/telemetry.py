# ---------------------------------------------------------------------------
# File: telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Lightweight telemetry for pyezlist (events + counters).
#
# Notes:
#	- Backends are "sinks"; the facade never raises into the UI.
#	- Default sink is NullSink. LogSink mirrors into stdlib logging.
#	- MemorySink records everything for tests.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 02/09/2026	pyezlist dev				Initial version for pyezlist
# 02/12/2026	pyezlist dev				Drop timer helper (no long-running operations to time)
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Emit telemetry records as INFO log lines.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.info("telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.info(
			"telemetry.metric name=%s value=%s attrs=%s",
			metric.name,
			metric.value,
			metric.attrs,
		)


class MemorySink:
	"""
	Keeps emitted records in lists for inspection.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def event_names(self) -> list[str]:
		return [e.name for e in self.events]

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry facade.

	Disabled instances drop everything. Sink failures are logged, not raised.
	"""

	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[Mapping[str, Any]] = None) -> None:
		if not self._enabled:
			return
		record = TelemetryEvent(name=name, timestamp=time.time(), attrs=dict(attrs or {}))
		try:
			self._sink.emit_event(record)
		except Exception:
			logging.getLogger(__name__).exception("Telemetry sink failed on event %s", name)

	def counter(
		self,
		name: str,
		value: int = 1,
		attrs: Optional[Mapping[str, Any]] = None,
	) -> None:
		if not self._enabled:
			return
		record = TelemetryMetric(name=name, value=float(value), attrs=dict(attrs or {}))
		try:
			self._sink.emit_metric(record)
		except Exception:
			logging.getLogger(__name__).exception("Telemetry sink failed on metric %s", name)


# ---------------------------------------------------------------------------
# Global instance
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any | None, logger: logging.Logger | None = None) -> Telemetry:
	"""
	Build and install the global telemetry instance.

	cfg keys:
		telemetry_enabled:	bool (default False)
		telemetry_sink:		"null" | "log" (default "null")
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False)) if cfg is not None else False
	sink_name = cfg.get("telemetry_sink", "null") if cfg is not None else "null"

	if not enabled:
		_telemetry = Telemetry(False, NullSink())
	elif sink_name == "log" and logger is not None:
		_telemetry = Telemetry(True, LogSink(logger))
	else:
		_telemetry = Telemetry(True, NullSink())

	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the global instance; a disabled one if init_telemetry() never ran.
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry
