# ---------------------------------------------------------------------------
# File: default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Default command definitions for pyezlist.
#
# Notes:
#	- items.add returns the bool from ListState.on_submit().
#	- app.quit is injected so tests can run without a Tk root.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 02/10/2026	pyezlist dev				Initial version for pyezlist
# 02/13/2026	pyezlist dev				Platform-aware quit label/shortcut
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Callable
import sys

from pyezlist.app.commands import Command, CommandRegistry
from pyezlist.app.state import ListState


ADD_ITEM = "items.add"
QUIT = "app.quit"


def register_default_commands(
	registry: CommandRegistry,
	*,
	state: ListState,
	quit_fn: Callable[[], None],
	platform: str | None = None,
) -> None:
	is_mac = (platform or sys.platform) == "darwin"

	registry.register(Command(
		id=ADD_ITEM,
		label="Add",
		description="Append the current input to the list.",
		shortcut="RETURN",
		handler=state.on_submit,
	))

	registry.register(Command(
		id=QUIT,
		label="Quit pyezlist" if is_mac else "Quit",
		description="Exit pyezlist.",
		shortcut="CMD+Q" if is_mac else "CTRL+Q",
		handler=quit_fn,
	))
