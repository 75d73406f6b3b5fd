# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#	Main window for pyezlist.
#
# Notes:
#	- App is a themed Tk root (ttkthemes.ThemedTk).
#	- App owns config, logging/telemetry init, the command registry, the
#	  global keymap and the ListState (as list_state; Tk.state is wm_state).
#	- Top-level components are indexed by id (unique) and name.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 02/09/2026	pyezlist dev				Initial version for pyezlist
# 02/10/2026	pyezlist dev				Own ListState + items.add command
# 02/13/2026	pyezlist dev				Apply ttk theme from cfg + install keymap bindings
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from ttkthemes import ThemedTk

from pyezlist.app.commands import Command, CommandRegistry
from pyezlist.app.default_commands import register_default_commands
from pyezlist.app.keys import KeyMap, build_default_keymap
from pyezlist.app.state import ListState
from pyezlist.core.logging import get_app_logger, init_logging
from pyezlist.core.telemetry import init_telemetry
from pyezlist.ui.component import Component


DEFAULT_TITLE = "pyezlist"
DEFAULT_THEME = "arc"

log = get_app_logger()


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Read-only wrapper around the cfg dict passed to App.
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)


class App(ThemedTk):
	"""
	App

	Root window for pyezlist. Hosts the component tree.
	"""

	def __init__(
		self,
		width: int | None = None,
		height: int | None = None,
		title: str | None = None,
		cfg: dict[str, Any] | None = None,
	) -> None:
		super().__init__()

		self.cfg = AppConfig(cfg)

		init_logging(self.cfg)
		self.telemetry = init_telemetry(self.cfg, logger=get_app_logger("telemetry"))

		self.title_text = title or self.cfg.get("title", DEFAULT_TITLE)
		self.title(self.title_text)

		self.active_theme = self._apply_theme(self.cfg.get("theme", DEFAULT_THEME))

		# -------------------------------------------------------------------
		# State + commands
		# -------------------------------------------------------------------

		self.list_state = ListState(telemetry=self.telemetry)

		self.commands = CommandRegistry()
		register_default_commands(self.commands, state=self.list_state, quit_fn=self.quit_app)

		self.keymap: KeyMap = build_default_keymap()
		self._bound_keyseqs: list[str] = []
		self.bind_keymap()

		# -------------------------------------------------------------------
		# Component registry
		# -------------------------------------------------------------------

		self.components: list[Component] = []
		self._components_by_id: dict[str, Component] = {}
		self._components_by_name: dict[str, list[Component]] = {}

		# Screen dimensions must be known before geometry is applied.
		self.update_idletasks()
		self._apply_geometry(
			width if width is not None else self.cfg.get("width"),
			height if height is not None else self.cfg.get("height"),
		)

		if bool(self.cfg.get("scrollable", False)):
			self._build_scrollable_root()
			if bool(self.cfg.get("mousewheel", True)):
				self._bind_mousewheel()
		else:
			self.root_frame = ttk.Frame(self)
			self.root_frame.pack(fill="both", expand=True)

		log.info("App started (theme=%s)", self.active_theme)
		self.telemetry.event("app.start", {"theme": self.active_theme})

	# -----------------------------------------------------------------------
	# Commands / keys
	# -----------------------------------------------------------------------

	def register_command(self, command: Command) -> None:
		self.commands.register(command)

	def invoke(self, command_id: str) -> Any:
		return self.commands.invoke(command_id)

	def bind_key(self, keyseq: str, command_id: str, *, overwrite: bool = True) -> None:
		self.keymap.bind(keyseq, command_id, overwrite=overwrite)
		self.bind_keymap()

	def bind_keymap(self) -> None:
		"""
		(Re)install every keymap binding on the root window.
		"""
		for keyseq in self._bound_keyseqs:
			self.unbind_all(keyseq)
		self._bound_keyseqs.clear()

		for keyseq, command_id in self.keymap.items():
			try:
				self.bind_all(keyseq, self._make_key_handler(command_id))
			except tk.TclError:
				# e.g. <Command-q> on a non-Aqua Tk build
				log.debug("Key sequence %s not supported by this Tk; skipping", keyseq)
				continue
			self._bound_keyseqs.append(keyseq)

	def _make_key_handler(self, command_id: str):
		def _handler(_event: tk.Event) -> str:
			self.invoke(command_id)
			return "break"
		return _handler

	def quit_app(self) -> None:
		log.info("Quit requested")
		self.telemetry.event("app.quit")
		self.destroy()

	# -----------------------------------------------------------------------
	# Component lifecycle
	# -----------------------------------------------------------------------

	def add_component(self, component: Component) -> None:
		"""
		Add a top-level component. Component ids must be unique within the App.
		"""
		if component.id is None:
			raise ValueError("Component id must not be None")

		if component.id in self._components_by_id:
			existing = self._components_by_id[component.id]
			raise ValueError(
				f"Duplicate component id {component.id!r}: "
				f"existing={existing.__class__.__name__} name={existing.name!r}, "
				f"new={component.__class__.__name__} name={component.name!r}"
			)

		self.components.append(component)
		self._components_by_id[component.id] = component
		if component.name is not None:
			self._components_by_name.setdefault(component.name, []).append(component)

		component.mount(self.root_frame)
		component.layout()

	def remove_component(self, component: Component) -> None:
		if component not in self.components:
			return

		component.destroy()
		self.components.remove(component)

		if component.id is not None:
			self._components_by_id.pop(component.id, None)

		if component.name is not None:
			named = self._components_by_name.get(component.name, [])
			if component in named:
				named.remove(component)
			if not named:
				self._components_by_name.pop(component.name, None)

	def clear_components(self) -> None:
		for component in list(self.components):
			component.destroy()

		self.components.clear()
		self._components_by_id.clear()
		self._components_by_name.clear()

	def redraw_components(self) -> None:
		for component in self.components:
			component.redraw()
		self.update_idletasks()

	def get_component(self, component_id: str) -> Optional[Component]:
		return self._components_by_id.get(component_id)

	def find_component_by_name(self, name: str) -> Optional[Component]:
		named = self._components_by_name.get(name, [])
		return named[0] if named else None

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_theme(self, theme: Any) -> str:
		current = str(ttk.Style(self).theme_use())
		if not theme:
			return current

		theme = str(theme)
		if theme not in self.get_themes():
			log.warning("Unknown ttk theme %r; keeping %r", theme, current)
			return current

		self.set_theme(theme)
		return theme

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		# Small window by default; this is a single-panel app.
		req_w = int(width) if width is not None else 480
		req_h = int(height) if height is not None else 560

		win_w = max(1, min(req_w, screen_w))
		win_h = max(1, min(req_h, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	def _build_scrollable_root(self) -> None:
		"""
		Scrollable root container: Canvas + inner Frame + Scrollbar.
		"""
		container = ttk.Frame(self)
		container.pack(fill="both", expand=True)

		self.canvas = tk.Canvas(container, highlightthickness=0)
		self.v_scroll = ttk.Scrollbar(container, orient="vertical", command=self.canvas.yview)

		self.root_frame = ttk.Frame(self.canvas)
		self.root_frame.bind("<Configure>", self._on_root_configure)

		window_id = self.canvas.create_window((0, 0), window=self.root_frame, anchor="nw")
		# Inner frame tracks the canvas width so rows can fill horizontally.
		self.canvas.bind(
			"<Configure>",
			lambda e: self.canvas.itemconfigure(window_id, width=e.width),
		)
		self.canvas.configure(yscrollcommand=self.v_scroll.set)

		self.canvas.pack(side="left", fill="both", expand=True)
		self.v_scroll.pack(side="right", fill="y")

	def _on_root_configure(self, _event: tk.Event) -> None:
		if hasattr(self, "canvas"):
			self.canvas.configure(scrollregion=self.canvas.bbox("all"))

	def _bind_mousewheel(self) -> None:
		def _on_mousewheel(event: tk.Event) -> None:
			if not hasattr(self, "canvas"):
				return
			delta = getattr(event, "delta", 0)
			if delta:
				self.canvas.yview_scroll(int(-1 * (delta / 120)), "units")

		self.bind_all("<MouseWheel>", _on_mousewheel)

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		self.mainloop()

	def __str__(self) -> str:
		return f"{self.__class__.__name__}(title={self.title_text!r})"

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
