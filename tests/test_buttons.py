"""Tests for button row resolution."""

import pytest

from pyqt_scriptdialog import ButtonId, DialogConstructionError
from pyqt_scriptdialog.dialog import (
    BUTTON_IDS,
    NO_BUTTON_ID,
    DialogButton,
    button_id_from_name,
    resolve_buttons,
)
from pyqt_scriptdialog.protocols import DialogConfig, set_dialog_config


def _pairs(buttons):
    return [(button.id, button.label) for button in buttons]


def test_role_names_are_lowercase_and_exact():
    """Role lookup is case-sensitive; unknown names have no role."""
    assert set(BUTTON_IDS) == {
        "ok", "yes", "save", "apply", "close", "no", "cancel", "help", "context_help",
    }
    assert button_id_from_name("cancel") == ButtonId.CANCEL
    assert button_id_from_name("Cancel") == NO_BUTTON_ID
    assert button_id_from_name("bogus") == NO_BUTTON_ID


def test_default_buttons_when_no_labels():
    """No labels gives OK then Cancel."""
    assert _pairs(resolve_buttons()) == [(ButtonId.OK, "OK"), (ButtonId.CANCEL, "Cancel")]
    assert _pairs(resolve_buttons([])) == [(ButtonId.OK, "OK"), (ButtonId.CANCEL, "Cancel")]


def test_default_buttons_when_buttons_not_requested():
    """include_buttons=False ignores the inputs and uses the defaults."""
    buttons = resolve_buttons(["Go"], {"ok": "Go"}, include_buttons=False)
    assert _pairs(buttons) == [(ButtonId.OK, "OK"), (ButtonId.CANCEL, "Cancel")]


def test_default_buttons_follow_config():
    """Hosts can change the fallback button row."""
    set_dialog_config(DialogConfig(default_buttons=[("close", "Close")]))
    assert _pairs(resolve_buttons()) == [(ButtonId.CLOSE, "Close")]


def test_labels_without_roles():
    """Labels keep their order and start with no role."""
    buttons = resolve_buttons(["Go", "Stop", "Help"])
    assert _pairs(buttons) == [(NO_BUTTON_ID, "Go"), (NO_BUTTON_ID, "Stop"), (NO_BUTTON_ID, "Help")]


def test_roles_assigned_by_label():
    """Each role goes to the first button with the mapped label."""
    buttons = resolve_buttons(["Go", "Stop", "Stop"], {"ok": "Go", "cancel": "Stop"})
    assert _pairs(buttons) == [
        (ButtonId.OK, "Go"), (ButtonId.CANCEL, "Stop"), (NO_BUTTON_ID, "Stop"),
    ]
    assert buttons[1].is_cancel
    assert not buttons[2].is_cancel


def test_unknown_role_name_gives_no_role():
    """A role name outside the enumeration leaves the button without a role."""
    buttons = resolve_buttons(["Go"], {"launch": "Go"})
    assert _pairs(buttons) == [(NO_BUTTON_ID, "Go")]


def test_role_for_missing_label_is_an_error():
    """Mapping a role to a label that is not in the row aborts construction."""
    with pytest.raises(DialogConstructionError, match="ok"):
        resolve_buttons(["Go"], {"ok": "Missing"})
    with pytest.raises(DialogConstructionError):
        resolve_buttons(None, {"ok": "OK"})


def test_non_string_label_is_an_error():
    """Labels must be strings; numbers are converted."""
    assert _pairs(resolve_buttons([1])) == [(NO_BUTTON_ID, "1")]
    with pytest.raises(DialogConstructionError):
        resolve_buttons([{"label": "x"}])


def test_non_table_inputs_are_ignored():
    """Scalar label or role inputs are treated as absent."""
    assert _pairs(resolve_buttons("Go", "ok")) == [(ButtonId.OK, "OK"), (ButtonId.CANCEL, "Cancel")]


def test_dialog_button_is_cancel():
    """Only the CANCEL role counts as cancel."""
    assert DialogButton(ButtonId.CANCEL, "Nope").is_cancel
    assert not DialogButton(ButtonId.NO, "No").is_cancel
    assert not DialogButton(NO_BUTTON_ID, "Whatever").is_cancel
