from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tkinter import ttk
import tkinter as tk

from .component import Component


@dataclass(eq=False)
class Label(Component):
	"""
	Static text (heading, empty-list placeholder).
	"""
	text: str = ""
	style: str | None = None
	anchor: str = "center"

	def render(self) -> str:
		return self.text

	def build(self, parent: tk.Misc) -> tk.Widget:
		if self.style:
			return ttk.Label(parent, text=self.text, anchor=self.anchor, style=self.style)
		return ttk.Label(parent, text=self.text, anchor=self.anchor)

	def pack_options(self) -> dict[str, Any]:
		return {"fill": "x", "pady": (4, 8)}
