# ---------------------------------------------------------------------------
# File: test_default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for default command registration.
#
# Notes:
#	- Handlers are exercised against a real ListState and a fake quit.
# ---------------------------------------------------------------------------

from pyezlist.app.commands import CommandRegistry
from pyezlist.app.default_commands import ADD_ITEM, QUIT, register_default_commands
from pyezlist.app.state import ListState


def _registry(platform: str = "linux") -> tuple[CommandRegistry, ListState, list[str]]:
	registry = CommandRegistry()
	state = ListState()
	quits: list[str] = []
	register_default_commands(
		registry,
		state=state,
		quit_fn=lambda: quits.append("quit"),
		platform=platform,
	)
	return registry, state, quits


def test_registers_add_and_quit():
	registry, _, _ = _registry()

	assert registry.has(ADD_ITEM)
	assert registry.has(QUIT)


def test_add_item_submits_draft():
	registry, state, _ = _registry()
	state.on_change("Milk")

	assert registry.invoke(ADD_ITEM) is True
	assert state.items == ("Milk",)
	assert state.draft == ""


def test_add_item_blank_returns_false():
	registry, state, _ = _registry()
	state.on_change("  ")

	assert registry.invoke(ADD_ITEM) is False
	assert state.items == ()
	assert state.draft == "  "


def test_quit_calls_injected_fn():
	registry, _, quits = _registry()

	registry.invoke(QUIT)

	assert quits == ["quit"]


def test_quit_labels_are_platform_aware():
	mac, _, _ = _registry("darwin")
	other, _, _ = _registry("linux")

	mac_quit = mac.get(QUIT)
	other_quit = other.get(QUIT)
	assert mac_quit is not None and other_quit is not None

	assert mac_quit.label == "Quit pyezlist"
	assert mac_quit.shortcut == "CMD+Q"
	assert other_quit.label == "Quit"
	assert other_quit.shortcut == "CTRL+Q"
