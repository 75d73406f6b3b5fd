# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Logging helpers for pyezlist (stdlib logging).
#
# Notes:
#	- No Tk dependencies; safe to call before the window exists.
#	- init_logging() is idempotent: an unchanged config is a no-op.
#
#	Recognized cfg keys (dotted form wins over the flat alias):
#		"logging.level"			/ "log_level"		(default: "INFO")
#		"logging.console"		/ "log_console"		(default: True)
#		"logging.file"			/ "log_file"		(default: None)
#		"logging.file_mode"		/ "log_file_mode"	(default: "a")
#		"logging.reset_root"	/ "log_reset_root"	(default: True)
#		"logging.format"		/ "log_format"
#		"logging.datefmt"		/ "log_datefmt"		(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 02/09/2026	pyezlist dev				Initial version for pyezlist
# 02/11/2026	pyezlist dev				Collapse alias lookups into _setting()
# ---------------------------------------------------------------------------

from __future__ import annotations

from pathlib import Path
from typing import Any
import logging


APP_LOGGER_NAME = "pyezlist.app"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()			-> pyezlist.app
		get_app_logger("state")		-> pyezlist.app.state
		get_app_logger("panel")		-> pyezlist.app.panel
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_NAME}.{component}")
	return logging.getLogger(APP_LOGGER_NAME)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Configure the root logger from cfg.

	Args:
		cfg:
			Anything with get(key, default) (AppConfig, dict) or None.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	level = _coerce_level(_setting(cfg, "level", "INFO"))
	console = bool(_setting(cfg, "console", True))
	log_file = _setting(cfg, "file", None)
	log_file = str(log_file) if log_file else None
	file_mode = _coerce_file_mode(_setting(cfg, "file_mode", "a"))
	reset_root = bool(_setting(cfg, "reset_root", True))
	fmt = str(_setting(cfg, "format", DEFAULT_FORMAT))
	datefmt = str(_setting(cfg, "datefmt", DEFAULT_DATEFMT))

	signature = (level, console, log_file, file_mode, reset_root, fmt, datefmt)
	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	root = logging.getLogger()
	root.setLevel(level)

	if reset_root:
		for handler in list(root.handlers):
			root.removeHandler(handler)

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if log_file:
		Path(log_file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		root.addHandler(fh)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _setting(cfg: Any | None, key: str, default: Any) -> Any:
	"""
	Look up "logging.<key>" first, then "log_<key>", then default.
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if not callable(getter):
		return default

	value = getter(f"logging.{key}", None)
	if value is None:
		value = getter(f"log_{key}", None)
	return default if value is None else value


def _coerce_level(level: Any) -> int:
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	# Only append or truncate.
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	global _INITIALIZED, _CONFIG_SIGNATURE
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
