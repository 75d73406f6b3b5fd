# ---------------------------------------------------------------------------
# File: list_panel.py
# ---------------------------------------------------------------------------
# Description:
#	ListPanel: heading + input form + item list (or empty placeholder).
#
# Notes:
#	- State lives in ListState; the panel only forwards events and mirrors
#	  snapshots into widgets.
#	- Input changes reach ListState.on_change through a StringVar write trace.
#	- Submit (Enter or the Add button) goes through the "items.add" command
#	  when an invoker is injected, otherwise straight to ListState.on_submit.
#	- The <Return> handler returns "break" so Tk's default key handling for
#	  the Entry never runs after a submit.
#	- Empty list => placeholder Label, never an ItemListView.
#	- The input hint ("Enter a new item...") is drawn in the Entry while it is
#	  empty and unfocused. Hint text is never passed to ListState.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 02/10/2026	pyezlist dev				Initial version
# 02/11/2026	pyezlist dev				Swap placeholder/list body on state change
# 02/13/2026	pyezlist dev				Route submit through command invoker + input hint text
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk

from pyezlist.app.default_commands import ADD_ITEM as ADD_ITEM_COMMAND
from pyezlist.app.state import ListSnapshot, ListState
from pyezlist.core.logging import get_app_logger

from .component import Component
from .item_list import ItemListView
from .label import Label


DEFAULT_TITLE = "My Awesome List"
DEFAULT_INPUT_HINT = "Enter a new item..."
DEFAULT_SUBMIT_LABEL = "Add"
DEFAULT_EMPTY_MESSAGE = "No items yet. Add something!"

HINT_FOREGROUND = "#8A8A8A"

Invoker = Callable[[str], Any]

log = get_app_logger("panel")


@dataclass(eq=False)
class ListPanel(Component):
	"""
	ListPanel

	render():
		("placeholder", empty_message)			when there are no items
		("list", ((0, "Milk"), (1, "Eggs")))	otherwise
	"""
	state: ListState = field(default_factory=ListState)
	invoker: Optional[Invoker] = None

	title: str = DEFAULT_TITLE
	input_hint: str = DEFAULT_INPUT_HINT
	submit_label: str = DEFAULT_SUBMIT_LABEL
	empty_message: str = DEFAULT_EMPTY_MESSAGE

	heading: Label | None = field(default=None, init=False, repr=False)
	body: Component | None = field(default=None, init=False, repr=False)

	_form: ttk.Frame | None = field(default=None, init=False, repr=False)
	_entry: ttk.Entry | None = field(default=None, init=False, repr=False)
	_button: ttk.Button | None = field(default=None, init=False, repr=False)
	_draft_var: tk.StringVar | None = field(default=None, init=False, repr=False)
	_showing_hint: bool = field(default=False, init=False, repr=False)

	# -----------------------------------------------------------------------
	# Rendering
	# -----------------------------------------------------------------------

	def render(self) -> tuple[str, Any]:
		items = self.state.items
		if not items:
			return ("placeholder", self.empty_message)
		return ("list", ItemListView(items=items).render())

	def build(self, parent: tk.Misc) -> tk.Widget:
		root = ttk.Frame(parent, padding=16)

		self.heading = Label(name="Heading", text=self.title, style="Heading.TLabel")
		self._configure_styles(root)

		form = ttk.Frame(root)
		self._form = form

		self._draft_var = tk.StringVar(master=root, value=self.state.draft)
		self._draft_var.trace_add("write", self._on_var_write)

		entry = ttk.Entry(form, textvariable=self._draft_var)
		entry.pack(side="left", fill="x", expand=True, padx=(0, 8))
		entry.bind("<Return>", self.submit)
		entry.bind("<KP_Enter>", self.submit)
		entry.bind("<FocusIn>", self._on_focus_in)
		entry.bind("<FocusOut>", self._on_focus_out)
		self._entry = entry

		button = ttk.Button(form, text=self.submit_label, command=self.submit)
		button.pack(side="right")
		self._button = button

		self.body = self._make_body(self.state.items)
		self.components = [self.heading, self.body]

		return root

	def layout(self) -> None:
		if self.root is None:
			return

		self.root.pack(**self.pack_options())

		if self.heading is not None:
			self.heading.layout()
		if self._form is not None:
			self._form.pack(fill="x", pady=(0, 12))
		if self.body is not None:
			self.body.layout()

		if not self.state.draft:
			self._show_hint()

	def mount(self, parent: tk.Misc) -> None:
		super().mount(parent)
		self.state.subscribe(self._on_state)

	def destroy(self) -> None:
		self.state.unsubscribe(self._on_state)
		super().destroy()
		self.heading = None
		self.body = None
		self._form = None
		self._entry = None
		self._button = None
		self._draft_var = None
		self._showing_hint = False

	# -----------------------------------------------------------------------
	# Events
	# -----------------------------------------------------------------------

	def submit(self, event: tk.Event | None = None) -> str:
		"""
		Submit the current draft. Returns "break" to stop Tk's default handling.
		"""
		if self.invoker is not None:
			self.invoker(ADD_ITEM_COMMAND)
		else:
			self.state.on_submit()

		if self._entry is not None and event is None:
			# Button click moved focus; hand it back to the input.
			self._entry.focus_set()

		return "break"

	def _on_var_write(self, *_: Any) -> None:
		if self._showing_hint or self._draft_var is None:
			return
		self.state.on_change(self._draft_var.get())

	def _on_focus_in(self, _event: tk.Event) -> None:
		self._hide_hint()

	def _on_focus_out(self, _event: tk.Event) -> None:
		if not self.state.draft:
			self._show_hint()

	def _on_state(self, snap: ListSnapshot) -> None:
		if self.root is None:
			return

		if self._showing_hint and snap.draft:
			self._hide_hint()
		elif self._draft_var is not None and not self._showing_hint:
			if self._draft_var.get() != snap.draft:
				self._draft_var.set(snap.draft)

		self._update_body(snap.items)

	# -----------------------------------------------------------------------
	# Body (placeholder <-> list)
	# -----------------------------------------------------------------------

	def _make_body(self, items: tuple[str, ...]) -> Component:
		if not items:
			return Label(name="EmptyPlaceholder", text=self.empty_message, style="Placeholder.TLabel")
		return ItemListView(name="Items", items=items)

	def _update_body(self, items: tuple[str, ...]) -> None:
		body = self.body

		if isinstance(body, ItemListView) and items:
			if body.items != items:
				body.set_items(items)
			return

		if isinstance(body, Label) and not items:
			return

		log.debug("Switching list body (items=%d)", len(items))
		if body is not None:
			self.remove_component(body)

		self.body = self._make_body(items)
		self.add_component(self.body)

	# -----------------------------------------------------------------------
	# Input hint
	# -----------------------------------------------------------------------

	def _show_hint(self) -> None:
		if self._entry is None or self._draft_var is None or self._showing_hint:
			return
		if not self.input_hint:
			return
		try:
			if self._entry.focus_get() is self._entry:
				return
		except KeyError:
			pass

		self._showing_hint = True
		self._draft_var.set(self.input_hint)
		self._entry.configure(style="Hint.TEntry")

	def _hide_hint(self) -> None:
		if self._entry is None or self._draft_var is None or not self._showing_hint:
			return

		self._draft_var.set(self.state.draft)
		self._entry.configure(style="TEntry")
		self._showing_hint = False

	def _configure_styles(self, root: tk.Misc) -> None:
		style = ttk.Style(root)
		style.configure("Heading.TLabel", font=("TkDefaultFont", 18, "bold"))
		style.configure("Placeholder.TLabel", foreground=HINT_FOREGROUND)
		style.configure("Hint.TEntry", foreground=HINT_FOREGROUND)
