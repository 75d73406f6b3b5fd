# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#	Base UI Component for pyezlist (Tkinter).
#
# Notes:
#	Composite pattern: every component can contain child components.
#	render() is the pure display description; build() turns it into widgets.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 02/09/2026	pyezlist dev				Initial version for pyezlist
# 02/10/2026	pyezlist dev				Add render() hook + per-component pack options
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
from uuid import uuid4

import tkinter as tk
from tkinter import ttk


@dataclass
class Component:
	"""
	Base UI component.

	- id:	Stable identifier for lookup/tests (auto-generated when omitted).
	- name:	Friendly label (defaults to class name).

	Lifecycle:
	- mount() builds self.root and mounts children into it.
	- layout() packs root with pack_options(), then lays out children.
	- redraw() refreshes children.
	- destroy() destroys children then root.
	"""
	id: Optional[str] = None
	name: Optional[str] = None

	components: list["Component"] = field(default_factory=list)

	# tk.Misc covers Tk, Toplevel and all widgets.
	parent: Optional[tk.Misc] = field(default=None, init=False, repr=False)
	root: Optional[tk.Widget] = field(default=None, init=False, repr=False)

	def __post_init__(self) -> None:
		if not self.id:
			self.id = str(uuid4())
		if not self.name:
			self.name = self.__class__.__name__

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} id={self.id!r} name={self.name!r}>"

	@property
	def is_mounted(self) -> bool:
		return self.root is not None

	# -----------------------------------------------------------------------
	# Rendering
	# -----------------------------------------------------------------------

	def render(self) -> Any:
		"""
		Pure description of what this component displays.
		Containers describe their children.
		"""
		return tuple(child.render() for child in self.components)

	def build(self, parent: tk.Misc) -> tk.Widget:
		"""
		Create this component's root widget. Default is a Frame.
		"""
		return ttk.Frame(parent)

	def pack_options(self) -> dict[str, Any]:
		return {"fill": "both", "expand": True}

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	def mount(self, parent: tk.Misc) -> None:
		self.parent = parent
		self.root = self.build(parent)

		for child in self.components:
			child.mount(self.get_child_parent())

	def get_child_parent(self) -> tk.Misc:
		if self.root is None:
			raise RuntimeError(f"Component not mounted: id={self.id!r} name={self.name!r}")
		return self.root

	def add_component(self, child: "Component") -> None:
		self.components.append(child)

		if self.root is not None:
			child.mount(self.get_child_parent())
			child.layout()

	def remove_component(self, child: "Component") -> None:
		if child in self.components:
			child.destroy()
			self.components.remove(child)

	def clear_components(self) -> None:
		for child in list(self.components):
			child.destroy()
		self.components.clear()

	def layout(self) -> None:
		if self.root is None:
			return

		self.root.pack(**self.pack_options())

		for child in self.components:
			child.layout()

	def redraw(self) -> None:
		for child in self.components:
			child.redraw()

		if self.root is not None:
			self.root.update_idletasks()

	def destroy(self) -> None:
		for child in list(self.components):
			child.destroy()
		self.components.clear()

		if self.root is not None:
			self.root.destroy()
			self.root = None
