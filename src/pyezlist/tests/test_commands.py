# ---------------------------------------------------------------------------
# File: test_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the pyezlist command registry.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
# ---------------------------------------------------------------------------

import pytest

from pyezlist.app.commands import Command, CommandRegistry


def test_register_and_get_command():
	registry = CommandRegistry()
	cmd = Command(id="items.add", label="Add", handler=lambda: True)

	registry.register(cmd)

	assert registry.has("items.add") is True
	assert registry.get("items.add") is cmd


def test_register_rejects_empty_id():
	registry = CommandRegistry()

	with pytest.raises(ValueError):
		registry.register(Command(id="", handler=lambda: None))


def test_register_duplicate_id_raises():
	registry = CommandRegistry()
	registry.register(Command(id="x", handler=lambda: 1))

	with pytest.raises(ValueError):
		registry.register(Command(id="x", handler=lambda: 2))


def test_invoke_returns_handler_result():
	registry = CommandRegistry()
	calls: list[str] = []

	def handler():
		calls.append("called")
		return 123

	registry.register(Command(id="do", handler=handler))

	assert registry.invoke("do") == 123
	assert calls == ["called"]


def test_invoke_unknown_command_raises_key_error():
	registry = CommandRegistry()

	with pytest.raises(KeyError):
		registry.invoke("missing")
