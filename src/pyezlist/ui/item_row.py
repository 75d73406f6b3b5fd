from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import tkinter as tk
from tkinter import ttk

from .component import Component


@dataclass(eq=False)
class ItemRow(Component):
	"""
	One list entry. Displays its text as-is; holds no state of its own.
	"""
	text: str = ""

	def render(self) -> str:
		return self.text

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Label(parent, text=self.render(), anchor="w", padding=(12, 6))

	def pack_options(self) -> dict[str, Any]:
		return {"fill": "x", "pady": 2}

	def set_text(self, text: str) -> None:
		self.text = text
		if self.root is not None:
			self.root.configure(text=self.render())
