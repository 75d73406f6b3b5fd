# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared fixtures for pyezlist tests.
#
# Notes:
#	- Widget tests need a display; they skip cleanly when Tk can't start.
#	- App tests keep pytest's own logging handlers (no root reset).
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk

import pytest

from pyezlist.core.logging import _reset_logging_for_tests


TEST_APP_CFG = {
	"log_console": False,
	"log_reset_root": False,
	"log_level": "DEBUG",
}


@pytest.fixture
def tk_root():
	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"Tk display not available: {ex}")

	root.withdraw()
	try:
		yield root
	finally:
		try:
			root.destroy()
		except tk.TclError:
			pass


@pytest.fixture
def app():
	from pyezlist.app import App

	try:
		instance = App(width=320, height=240, cfg=dict(TEST_APP_CFG))
	except tk.TclError as ex:
		pytest.skip(f"Tk display not available: {ex}")

	instance.withdraw()
	try:
		yield instance
	finally:
		try:
			instance.destroy()
		except tk.TclError:
			pass
		_reset_logging_for_tests()
