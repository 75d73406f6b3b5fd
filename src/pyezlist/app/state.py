# ---------------------------------------------------------------------------
# File: state.py
# ---------------------------------------------------------------------------
# Description:
#	ListState: draft text + committed items for the list panel.
#
# Notes:
#	- UI-toolkit-agnostic; widgets feed events in and subscribe for changes.
#	- items is a tuple. Every accepted submit builds a new tuple, so
#	  snapshots handed to listeners are never mutated afterwards.
#	- A blank submit is silently ignored: no state change, no exception,
#	  nothing shown to the user.
#	- "Blank" means only WHITESPACE characters, the set String.prototype.trim()
#	  strips. U+FEFF is blank; U+001C..U+001F and U+0085 are content.
#	- The stored item is the draft as typed. Stripping only decides whether
#	  the draft is blank.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 02/10/2026	pyezlist dev				Initial version
# 02/12/2026	pyezlist dev				Add telemetry + subscribe/unsubscribe
# 02/16/2026	pyezlist dev				trim() whitespace set; coerce items to tuple
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from pyezlist.core.logging import get_app_logger
from pyezlist.core.telemetry import Telemetry, get_telemetry


log = get_app_logger("state")


@dataclass(frozen=True, slots=True)
class ListSnapshot:
	"""
	Immutable view of ListState at one point in time.
	"""
	draft: str = ""
	items: tuple[str, ...] = ()


StateListener = Callable[[ListSnapshot], None]


# WhiteSpace + LineTerminator code points.
WHITESPACE = (
	"\t\n\v\f\r \u00a0\u1680"
	"\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
	"\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def is_blank(text: str) -> bool:
	return text.strip(WHITESPACE) == ""


@dataclass(slots=True)
class ListState:
	"""
	ListState

	Two state variables (draft, items) and two transitions (on_change, on_submit).
	"""
	draft: str = ""
	items: tuple[str, ...] = ()

	telemetry: Optional[Telemetry] = None

	_listeners: list[StateListener] = field(default_factory=list, init=False, repr=False)

	def __post_init__(self) -> None:
		self.items = tuple(self.items)

	# -----------------------------------------------------------------------
	# Transitions
	# -----------------------------------------------------------------------

	def on_change(self, new_text: str) -> None:
		"""
		Replace the draft with the full current text of the input.
		"""
		if new_text == self.draft:
			return
		self.draft = new_text
		self._notify()

	def on_submit(self) -> bool:
		"""
		Commit the draft as a new item.

		Returns:
			True if an item was appended, False if the draft was blank.
		"""
		if is_blank(self.draft):
			log.debug("Ignoring blank submit (draft=%r)", self.draft)
			self._telemetry().event("items.rejected", {"length": len(self.draft)})
			return False

		self.items = self.items + (self.draft,)
		self.draft = ""

		log.debug("Added item #%d", len(self.items))
		self._telemetry().counter("items.added", 1, {"count": len(self.items)})

		self._notify()
		return True

	# -----------------------------------------------------------------------
	# Queries
	# -----------------------------------------------------------------------

	@property
	def is_empty(self) -> bool:
		return not self.items

	def snapshot(self) -> ListSnapshot:
		return ListSnapshot(draft=self.draft, items=self.items)

	# -----------------------------------------------------------------------
	# Listeners
	# -----------------------------------------------------------------------

	def subscribe(self, cb: StateListener) -> None:
		"""
		Register cb and call it once with the current snapshot.
		"""
		if cb not in self._listeners:
			self._listeners.append(cb)
		cb(self.snapshot())

	def unsubscribe(self, cb: StateListener) -> None:
		if cb in self._listeners:
			self._listeners.remove(cb)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _telemetry(self) -> Telemetry:
		return self.telemetry if self.telemetry is not None else get_telemetry()

	def _notify(self) -> None:
		snap = self.snapshot()
		for cb in list(self._listeners):
			cb(snap)
