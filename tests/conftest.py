"""pytest configuration and fixtures for pyqt-scriptdialog tests."""

import pytest

from pyqt_scriptdialog.protocols import set_dialog_config


@pytest.fixture(autouse=True)
def default_dialog_config():
    """Restore the default DialogConfig around every test."""
    set_dialog_config(None)
    yield
    set_dialog_config(None)


@pytest.fixture
def sample_controls():
    """Control descriptors covering every serialisable control class."""
    return [
        {"class": "label", "name": "title", "label": "Settings"},
        {"class": "edit", "name": "a", "value": "hello|world"},
        {"class": "intedit", "name": "b", "value": 5, "min": 0, "max": 10},
        {"class": "checkbox", "name": "c", "label": "Enable", "value": True},
        {"class": "floatedit", "name": "d", "value": 0.1, "min": 0, "max": 1, "step": 0.05},
        {"class": "dropdown", "name": "e", "items": ["one", "two:three"], "value": "two:three"},
        {"class": "textbox", "name": "f", "value": "line 1\nline 2"},
        {"class": "coloralpha", "name": "g", "value": "#11223344"},
    ]
