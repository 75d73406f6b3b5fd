# ---------------------------------------------------------------------------
# File: test_state.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ListState (draft/items transitions).
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Telemetry is captured with MemorySink.
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyezlist.app.state import ListSnapshot, ListState, is_blank
from pyezlist.core.telemetry import MemorySink, Telemetry


def test_initial_state_is_empty():
	state = ListState()

	assert state.draft == ""
	assert state.items == ()
	assert state.is_empty is True


def test_on_change_overwrites_draft_without_validation():
	state = ListState()

	state.on_change("Mi")
	state.on_change("Milk")
	assert state.draft == "Milk"

	state.on_change("   ")
	assert state.draft == "   "
	assert state.items == ()


@pytest.mark.parametrize("text", ["Milk", "  Milk  ", "\tEggs\n", "a", " x", "\x1c", "\x1f", "\x85", "\u200b"])
def test_submit_appends_untrimmed_draft_and_clears_it(text):
	state = ListState()
	state.on_change(text)

	assert state.on_submit() is True

	assert state.items == (text,)
	assert state.draft == ""


@pytest.mark.parametrize(
	"text",
	["", " ", "   ", "\t", "\n", " \t\r\n ", "\u00a0", "\ufeff", "\u2028", "\u3000", "\v\f"],
)
def test_submit_blank_is_silent_noop(text):
	state = ListState(items=("Milk",))
	state.on_change(text)

	assert state.on_submit() is False

	assert state.items == ("Milk",)
	assert state.draft == text


def test_submit_preserves_order():
	state = ListState()

	for text in ("first", "second", "third"):
		state.on_change(text)
		state.on_submit()

	assert state.items == ("first", "second", "third")


def test_submit_builds_new_tuple_each_time():
	state = ListState()
	state.on_change("Milk")
	state.on_submit()

	before = state.items

	state.on_change("Eggs")
	state.on_submit()

	assert state.items is not before
	assert before == ("Milk",)
	assert state.items == ("Milk", "Eggs")


def test_milk_blank_eggs_scenario():
	state = ListState()

	state.on_change("Milk")
	state.on_submit()
	assert state.items == ("Milk",)
	assert state.draft == ""

	state.on_change("  ")
	state.on_submit()
	assert state.items == ("Milk",)

	state.on_change("Eggs")
	state.on_submit()
	assert state.items == ("Milk", "Eggs")
	assert state.draft == ""


def test_submit_without_typing_does_nothing():
	state = ListState()

	assert state.on_submit() is False
	assert state.snapshot() == ListSnapshot(draft="", items=())


def test_is_blank():
	assert is_blank("")
	assert is_blank(" \t ")
	assert not is_blank(" a ")


def test_is_blank_uses_trim_whitespace_set():
	assert is_blank("\ufeff")
	assert is_blank("\u1680\u2009\u202f")
	assert not is_blank("\x1c")
	assert not is_blank("\x85")
	assert not is_blank("\u200b")


def test_items_given_as_list_are_stored_as_tuple():
	state = ListState(items=["Milk"])

	assert state.items == ("Milk",)

	state.on_change("Eggs")
	assert state.on_submit() is True
	assert state.items == ("Milk", "Eggs")


# ---------------------------------------------------------------------------
# Listeners
# ---------------------------------------------------------------------------

def test_subscribe_receives_current_snapshot_immediately():
	state = ListState(draft="x", items=("a",))
	seen: list[ListSnapshot] = []

	state.subscribe(seen.append)

	assert seen == [ListSnapshot(draft="x", items=("a",))]


def test_listeners_notified_on_change_and_submit():
	state = ListState()
	seen: list[ListSnapshot] = []
	state.subscribe(seen.append)
	seen.clear()

	state.on_change("Milk")
	state.on_submit()

	assert seen == [
		ListSnapshot(draft="Milk", items=()),
		ListSnapshot(draft="", items=("Milk",)),
	]


def test_rejected_submit_does_not_notify():
	state = ListState()
	seen: list[ListSnapshot] = []
	state.on_change("   ")
	state.subscribe(seen.append)
	seen.clear()

	state.on_submit()

	assert seen == []


def test_unsubscribe_stops_notifications():
	state = ListState()
	seen: list[ListSnapshot] = []
	state.subscribe(seen.append)
	state.unsubscribe(seen.append)
	seen.clear()

	state.on_change("Milk")

	assert seen == []


def test_subscribe_twice_registers_once():
	state = ListState()
	seen: list[ListSnapshot] = []

	state.subscribe(seen.append)
	state.subscribe(seen.append)
	seen.clear()

	state.on_change("x")

	assert len(seen) == 1


# ---------------------------------------------------------------------------
# Telemetry
# ---------------------------------------------------------------------------

def test_telemetry_counts_added_and_rejected():
	sink = MemorySink()
	state = ListState(telemetry=Telemetry(enabled=True, sink=sink))

	state.on_change("Milk")
	state.on_submit()

	state.on_change(" ")
	state.on_submit()

	assert [m.name for m in sink.metrics] == ["items.added"]
	assert sink.metrics[0].attrs["count"] == 1
	assert sink.event_names() == ["items.rejected"]
