# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#	Command definitions + registry for pyezlist.
#
# Notes:
#	Commands are the single invocation spine for UI actions: the Add button,
#	the Enter key and global shortcuts all end up in CommandRegistry.invoke().
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 02/09/2026	pyezlist dev				Initial version for pyezlist
# 02/12/2026	pyezlist dev				Add label/shortcut display hints
# 02/16/2026	pyezlist dev				Drop enablement + unused registry queries
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from pyezlist.core.logging import get_app_logger


CommandHandler = Callable[[], Any]

log = get_app_logger("commands")


@dataclass(frozen=True, slots=True)
class Command:
	"""
	Command

	- id:			Unique identifier (required), e.g. "items.add".
	- handler:		Callable executed on invoke.
	- label:		Optional friendly label.
	- description:	Optional help text.
	- shortcut:		Optional display hint, e.g. "CTRL+Q".
	"""
	id: str
	handler: CommandHandler

	label: Optional[str] = None
	description: Optional[str] = None
	shortcut: Optional[str] = None


class CommandRegistry:
	"""
	CommandRegistry

	Stores commands by id and invokes them.
	"""

	def __init__(self) -> None:
		self._commands: dict[str, Command] = {}

	def register(self, command: Command) -> None:
		if not command.id:
			raise ValueError("Command id must be a non-empty string")

		if self.has(command.id):
			raise ValueError(f"Duplicate command id: {command.id!r}")

		self._commands[command.id] = command

	def has(self, command_id: str) -> bool:
		return command_id in self._commands

	def get(self, command_id: str) -> Optional[Command]:
		return self._commands.get(command_id)

	def invoke(self, command_id: str) -> Any:
		"""
		Run a command's handler.

		Raises KeyError for unknown ids.
		"""
		command = self.get(command_id)
		if command is None:
			raise KeyError(f"Unknown command id: {command_id!r}")

		log.debug("Invoking %s", command_id)
		return command.handler()
