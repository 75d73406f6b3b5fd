# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public app package surface for pyezlist.
#
# Notes:
#	- Lazy exports: importing pyezlist.app.state must not pull in Tk/ttkthemes.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"AppConfig",
	"ListState",
	"ListSnapshot",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("pyezlist.app.app", "App"),
	"AppConfig": ("pyezlist.app.app", "AppConfig"),
	"ListState": ("pyezlist.app.state", "ListState"),
	"ListSnapshot": ("pyezlist.app.state", "ListSnapshot"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyezlist.app.app import App, AppConfig
	from pyezlist.app.state import ListState, ListSnapshot
