# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public UI package surface for pyezlist.
#
# Notes:
#	- Lazy exports (PEP 562) to avoid circular imports.
#	- Inside ui modules, import specific modules, not pyezlist.ui.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Component",
	"Label",
	"ItemRow",
	"ItemListView",
	"ListPanel",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Component": ("pyezlist.ui.component", "Component"),
	"Label": ("pyezlist.ui.label", "Label"),
	"ItemRow": ("pyezlist.ui.item_row", "ItemRow"),
	"ItemListView": ("pyezlist.ui.item_list", "ItemListView"),
	"ListPanel": ("pyezlist.ui.list_panel", "ListPanel"),
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
	from pyezlist.ui.component import Component
	from pyezlist.ui.label import Label
	from pyezlist.ui.item_row import ItemRow
	from pyezlist.ui.item_list import ItemListView
	from pyezlist.ui.list_panel import ListPanel
