# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#	Key mapping for pyezlist (Tk key sequence -> command id).
#
# Notes:
#	Pure mapping. App.bind_keymap() turns it into Tk bindings.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 02/09/2026	pyezlist dev				Initial version for pyezlist
# 02/13/2026	pyezlist dev				Add build_default_keymap (platform-aware quit)
# 02/16/2026	pyezlist dev				Drop unused unbind/keys/clear
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import sys


@dataclass
class KeyMap:
	"""
	KeyMap

	Bindings of key sequences (e.g. "<Control-q>") to command ids (e.g. "app.quit").
	"""
	_bindings: dict[str, str] = field(default_factory=dict)

	def bind(self, keyseq: str, command_id: str, *, overwrite: bool = True) -> None:
		if not keyseq:
			raise ValueError("keyseq must be a non-empty string")
		if not command_id:
			raise ValueError("command_id must be a non-empty string")

		if not overwrite and self.resolve(keyseq) is not None:
			raise ValueError(f"Key binding already exists for {keyseq!r}")

		self._bindings[keyseq] = command_id

	def resolve(self, keyseq: str) -> Optional[str]:
		return self._bindings.get(keyseq)

	def items(self) -> list[tuple[str, str]]:
		return list(self._bindings.items())


def build_default_keymap(platform: str | None = None) -> KeyMap:
	"""
	Default global bindings.

	Submit is not here: <Return> belongs to the input Entry, not the window.
	"""
	km = KeyMap()
	platform = platform or sys.platform

	km.bind("<Control-q>", "app.quit")

	if platform == "darwin":
		km.bind("<Command-q>", "app.quit")

	return km
