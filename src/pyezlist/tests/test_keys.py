# ---------------------------------------------------------------------------
# File: test_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for KeyMap and the default keymap.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
# ---------------------------------------------------------------------------

import pytest

from pyezlist.app.keys import KeyMap, build_default_keymap


def test_bind_and_resolve():
	m = KeyMap()

	m.bind("<Control-q>", "app.quit")

	assert m.resolve("<Control-q>") == "app.quit"
	assert m.items() == [("<Control-q>", "app.quit")]


def test_bind_rejects_existing_when_overwrite_false():
	m = KeyMap()
	m.bind("<Control-q>", "app.quit")

	with pytest.raises(ValueError):
		m.bind("<Control-q>", "other", overwrite=False)

	m.bind("<Control-q>", "other")
	assert m.resolve("<Control-q>") == "other"


def test_bind_rejects_empty_inputs():
	m = KeyMap()

	with pytest.raises(ValueError):
		m.bind("", "app.quit")

	with pytest.raises(ValueError):
		m.bind("<Control-q>", "")

def test_default_keymap_linux_binds_control_q_only():
	km = build_default_keymap(platform="linux")

	assert km.resolve("<Control-q>") == "app.quit"
	assert km.resolve("<Command-q>") is None


def test_default_keymap_mac_adds_command_q():
	km = build_default_keymap(platform="darwin")

	assert km.resolve("<Command-q>") == "app.quit"
	assert km.resolve("<Control-q>") == "app.quit"


def test_default_keymap_does_not_bind_return():
	km = build_default_keymap(platform="linux")

	assert km.resolve("<Return>") is None
