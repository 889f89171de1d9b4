"""Tests for the ScriptDialog aggregate."""

import logging

import pytest

from pyqt_scriptdialog import ButtonId, DialogConstructionError, ScriptDialog
from pyqt_scriptdialog.forms import CONSTANTS
from pyqt_scriptdialog.protocols import DescriptorSource


ROUND_TRIP_CONTROLS = [
    {"class": "edit", "name": "a", "value": "hello|world"},
    {"class": "intedit", "name": "b", "value": 5, "min": 0, "max": 10},
    {"class": "checkbox", "name": "c", "value": True},
]


class ScriptArray(DescriptorSource):
    """Positional-only table, as a scripting bridge would supply."""

    def __init__(self, entries):
        self.entries = entries

    def get(self, name):
        return None

    def iterate(self):
        return list(self.entries)


def test_controls_keep_descriptor_order(sample_controls):
    """Controls are created in descriptor order."""
    dialog = ScriptDialog(sample_controls)
    assert [control.name for control in dialog.controls] == ["title", "a", "b", "c", "d", "e", "f", "g"]


def test_non_table_controls_is_an_error():
    """The control list must be a table."""
    with pytest.raises(DialogConstructionError, match=CONSTANTS.NON_TABLE_DIALOG_MSG):
        ScriptDialog("not a table")
    with pytest.raises(DialogConstructionError, match=CONSTANTS.NON_TABLE_DIALOG_MSG):
        ScriptDialog(None)


def test_bad_control_entries_are_errors():
    """Non-table entries and unknown classes abort construction."""
    with pytest.raises(DialogConstructionError):
        ScriptDialog([{"class": "edit", "name": "ok"}, 42])
    with pytest.raises(DialogConstructionError):
        ScriptDialog([{"class": "bogus", "name": "x"}])


def test_custom_descriptor_source():
    """Any DescriptorSource can supply the control list."""
    dialog = ScriptDialog(ScriptArray([{"class": "edit", "name": "a", "value": "v"}]))
    assert dialog.read_back() == (False, {"a": "v"})


def test_default_buttons():
    """No labels gives (OK, "OK") then (CANCEL, "Cancel")."""
    dialog = ScriptDialog([], include_buttons=True)
    assert [(b.id, b.label) for b in dialog.buttons] == [
        (ButtonId.OK, "OK"), (ButtonId.CANCEL, "Cancel"),
    ]


def test_button_role_error_surfaces_from_dialog():
    """A role naming a missing label aborts dialog construction."""
    with pytest.raises(DialogConstructionError):
        ScriptDialog([], ["Go"], {"ok": "Missing"})


def test_read_back_without_button_pushed():
    """No pushed button reads back as False."""
    dialog = ScriptDialog(ROUND_TRIP_CONTROLS)
    activation, values = dialog.read_back()
    assert activation is False
    assert values == {"a": "hello|world", "b": 5, "c": True}


def test_read_back_activation():
    """Cancel-role buttons read back as False, others as their label."""
    dialog = ScriptDialog([], ["Apply", "Nope", "Other"], {"apply": "Apply", "cancel": "Nope"})

    dialog.push_button(0)
    assert dialog.read_back()[0] == "Apply"
    dialog.push_button(1)
    assert dialog.read_back()[0] is False
    dialog.push_button(2)
    assert dialog.read_back()[0] == "Other"
    dialog.push_button(-1)
    assert dialog.read_back()[0] is False


def test_read_back_default_cancel_button():
    """The default Cancel button reads back as False."""
    dialog = ScriptDialog([])
    dialog.push_button(1)
    assert dialog.read_back() == (False, {})
    dialog.push_button(0)
    assert dialog.read_back() == ("OK", {})


def test_read_back_without_buttons():
    """With use_buttons off only the values are returned."""
    dialog = ScriptDialog(ROUND_TRIP_CONTROLS, include_buttons=False)
    dialog.push_button(0)
    assert dialog.read_back() == ({"a": "hello|world", "b": 5, "c": True},)


def test_read_back_label_is_none():
    """Labels read back as None under their name."""
    dialog = ScriptDialog([{"class": "label", "name": "l", "label": "text"}])
    assert dialog.read_back()[1] == {"l": None}


def test_read_back_values_in_control_order(sample_controls):
    """The value mapping follows control order."""
    values = ScriptDialog(sample_controls).read_back()[1]
    assert list(values) == ["title", "a", "b", "c", "d", "e", "f", "g"]
    assert values["e"] == "two:three"
    assert values["g"] == "#11223344"


def test_push_button_out_of_range(caplog):
    """Out-of-range indexes are logged and treated as no button."""
    dialog = ScriptDialog([])
    dialog.push_button(0)
    with caplog.at_level(logging.ERROR):
        dialog.push_button(5)
    assert dialog.button_pushed == -1
    assert dialog.pushed_button is None
    assert "not in range" in caplog.text

    dialog.push_button(-7)
    assert dialog.button_pushed == -1


def test_button_pushed_is_read_only():
    """The pushed index only changes through push_button, so it stays in range."""
    dialog = ScriptDialog([])
    with pytest.raises(AttributeError):
        dialog.button_pushed = 9
    assert dialog.button_pushed == -1
    assert dialog.read_back() == (False, {})


def test_serialise_format():
    """Entries are name:value joined by |, with names and values escaped."""
    dialog = ScriptDialog([
        {"class": "label", "name": "skip", "label": "not serialised"},
        {"class": "edit", "name": "a:b", "value": "x|y"},
        {"class": "checkbox", "name": "c", "value": True},
    ])
    assert dialog.serialise() == "a#3Ab:x#7Cy|c:1"


def test_serialise_empty_dialog():
    """A dialog without serialisable controls serialises to an empty string."""
    assert ScriptDialog([{"class": "label", "name": "l"}]).serialise() == ""


def test_serialise_round_trip():
    """Serialising then restoring into a fresh dialog reproduces the values."""
    dialog = ScriptDialog(ROUND_TRIP_CONTROLS)
    dialog.get_control("a").set_value("changed|text:here")
    dialog.get_control("b").set_value(9)
    dialog.get_control("c").set_value(False)
    saved = dialog.serialise()

    restored = ScriptDialog(ROUND_TRIP_CONTROLS)
    restored.unserialise(saved)
    assert restored.read_back() == dialog.read_back()
    assert restored.read_back()[1] == {"a": "changed|text:here", "b": 9, "c": False}


def test_serialise_round_trip_all_controls(sample_controls):
    """Every serialisable control type survives a round trip."""
    dialog = ScriptDialog(sample_controls)
    restored = ScriptDialog([{**entry, "value": None} for entry in sample_controls])
    restored.unserialise(dialog.serialise())
    assert restored.read_back() == dialog.read_back()


def test_unserialise_skips_malformed_and_unknown_entries():
    """Tokens without ':' and unknown names are ignored."""
    dialog = ScriptDialog(ROUND_TRIP_CONTROLS)
    dialog.unserialise("garbage|gone:1|b:7||a:new:value")
    assert dialog.read_back()[1] == {"a": "new:value", "b": 7, "c": True}


def test_unserialise_empty_string():
    """An empty archive changes nothing."""
    dialog = ScriptDialog(ROUND_TRIP_CONTROLS)
    dialog.unserialise("")
    assert dialog.read_back()[1] == {"a": "hello|world", "b": 5, "c": True}


def test_unserialise_skips_labels():
    """Labels are never handed a serialised value."""
    dialog = ScriptDialog([{"class": "label", "name": "l", "label": "keep"}])
    dialog.unserialise("l:changed")
    assert dialog.controls[0].label == "keep"


def test_duplicate_names():
    """Duplicate names share a slot: both restore, the last reads back."""
    dialog = ScriptDialog([
        {"class": "edit", "name": "dup", "value": "first"},
        {"class": "edit", "name": "dup", "value": "second"},
    ])
    assert dialog.read_back()[1] == {"dup": "second"}
    assert dialog.get_control("dup") is dialog.controls[1]

    dialog.unserialise("dup:same")
    assert [control.read_back() for control in dialog.controls] == ["same", "same"]


def test_dialog_is_reusable():
    """Repeated serialise/unserialise cycles are stable."""
    dialog = ScriptDialog(ROUND_TRIP_CONTROLS)
    first = dialog.serialise()
    dialog.unserialise(first)
    dialog.unserialise(first)
    assert dialog.serialise() == first
