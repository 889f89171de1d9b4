"""Script dialog exceptions."""


class DialogError(Exception):
    """Base class for script dialog errors."""


class DialogConstructionError(DialogError):
    """Raised when a dialog cannot be built from the descriptors a script supplied.

    Only the overall shape is checked this strictly: a non-table control list or
    entry, a missing or unknown control class, or a button id naming a label
    that does not exist. Bad individual fields fall back to defaults instead.
    """
