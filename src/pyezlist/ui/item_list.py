# ---------------------------------------------------------------------------
# File: item_list.py
# ---------------------------------------------------------------------------
# Description:
#	ItemListView: renders an ordered sequence of strings as ItemRows.
#
# Notes:
#	- One ItemRow per element, in input order.
#	- Rows are keyed by position. That is only correct while the list is
#	  append-only (no removal, no reordering). If either is ever added, rows
#	  must be keyed by an id assigned when the item is appended, otherwise a
#	  re-render reuses the wrong row for the wrong item.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 02/10/2026	pyezlist dev				Initial version
# 02/11/2026	pyezlist dev				Reconcile rows by key instead of rebuilding on every update
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

import tkinter as tk
from tkinter import ttk

from .component import Component
from .item_row import ItemRow


RowKey = int


@dataclass(eq=False)
class ItemListView(Component):
	"""
	ItemListView

	render() -> ((0, "Milk"), (1, "Eggs"), ...)
	"""
	items: tuple[str, ...] = ()

	_rows: dict[RowKey, ItemRow] = field(default_factory=dict, init=False, repr=False)

	def __post_init__(self) -> None:
		super().__post_init__()
		self.items = tuple(self.items)
		self._reconcile()

	def render(self) -> tuple[tuple[RowKey, str], ...]:
		return tuple((key, text) for key, text in enumerate(self.items))

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent, padding=(0, 4))

	def pack_options(self) -> dict[str, Any]:
		return {"fill": "both", "expand": True}

	def set_items(self, items: Iterable[str]) -> None:
		self.items = tuple(items)
		self._reconcile()

	def row_for(self, key: RowKey) -> ItemRow | None:
		return self._rows.get(key)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _reconcile(self) -> None:
		wanted = dict(self.render())

		# Surplus rows (list got shorter).
		for key in [k for k in self._rows if k not in wanted]:
			self.remove_component(self._rows.pop(key))

		for key, text in wanted.items():
			row = self._rows.get(key)
			if row is None:
				row = ItemRow(name=f"ItemRow[{key}]", text=text)
				self._rows[key] = row
				self.add_component(row)
			elif row.text != text:
				row.set_text(text)
