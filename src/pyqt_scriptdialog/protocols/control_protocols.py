"""
Control ABC contracts for script dialogs.

Defines the capabilities a dialog control can offer, as explicit ABCs rather
than duck-typed method names:

- ValueGettable / ValueSettable: the external UI layer reads and writes the
  control's current value through these
- ValueSerialisable: the control takes part in the flat serialised state
- RangeConfigurable: numeric controls with an effective [minimum, maximum]

Every control can be read back; only some can be set, serialised or ranged.
"""

from abc import ABC, abstractmethod
from typing import Any


class ValueGettable(ABC):
    """
    ABC for controls that report a value.

    All controls implement this; non-input controls report None.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the control's current value.

        Returns:
            The value as it is read back to the script. None if the control
            carries no value.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for controls whose value the UI layer can change.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the control's value.

        Args:
            value: New value. Controls normalize it (clamp, coerce) rather
                than raising on out-of-range input.
        """
        pass


class ValueSerialisable(ABC):
    """
    ABC for controls that persist their value in the serialised state.

    unserialise_value() must accept anything serialise_value() produced for
    the same control type, and must not raise on foreign or garbage text.
    """

    @abstractmethod
    def serialise_value(self) -> str:
        """
        Serialise the current value.

        Returns:
            Text free of the ``|`` and ``:`` delimiters
        """
        pass

    @abstractmethod
    def unserialise_value(self, serialised: str) -> None:
        """
        Restore the value from serialised text.

        Args:
            serialised: Text produced by serialise_value(), or garbage
        """
        pass


class RangeConfigurable(ABC):
    """
    ABC for numeric controls with an effective value range.
    """

    @abstractmethod
    def configure_range(self, minimum: float, maximum: float) -> None:
        """
        Configure the valid range.

        An inverted or empty range (minimum >= maximum) resets to the full
        range of the control's number type.

        Args:
            minimum: Minimum allowed value
            maximum: Maximum allowed value
        """
        pass
