"""State: a switch delegates its behaviour to shared on and off states."""

import sys
from abc import ABC, abstractmethod


def _emit(out, text):
    print(text, file=out if out is not None else sys.stdout)


class State(ABC):
    """One state of a switch; states are shared singletons."""

    def __init__(self, *args, **kwargs):
        raise TypeError(f"use {type(self).__name__}.instance()")

    @abstractmethod
    def set_on(self, switch):
        """Handle a request to turn ``switch`` on."""

    @abstractmethod
    def set_off(self, switch):
        """Handle a request to turn ``switch`` off."""

    @abstractmethod
    def display(self, out):
        """Write the state's label to ``out`` and return it."""

    def change_state(self, switch, state):
        switch._state = state


class OnState(State):
    _instance = None

    @classmethod
    def instance(cls):
        """Return the one shared on state."""
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def set_on(self, switch):
        _emit(switch.out, "Already in ON state")

    def set_off(self, switch):
        _emit(switch.out, "Setting OFF from ON")
        self.change_state(switch, OffState.instance())

    def display(self, out):
        _emit(out, "ON")
        return "ON"


class OffState(State):
    _instance = None

    @classmethod
    def instance(cls):
        """Return the one shared off state."""
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def set_on(self, switch):
        _emit(switch.out, "Setting ON from OFF")
        self.change_state(switch, OnState.instance())

    def set_off(self, switch):
        _emit(switch.out, "Already in OFF state")

    def display(self, out):
        _emit(out, "OFF")
        return "OFF"


class Switch:
    """A switch that starts off."""

    def __init__(self, out=None):
        self.out = out
        self._state = OffState.instance()

    @property
    def state(self):
        return self._state

    def on(self):
        self._state.set_on(self)

    def off(self):
        self._state.set_off(self)

    def current_state(self):
        """Write the current state's label and return it."""
        return self._state.display(self.out)


def main(argv=None):
    """Flip a switch through a fixed sequence, showing its state each time."""
    switch = Switch()
    switch.current_state()
    for action in (switch.on, switch.off, switch.off, switch.on, switch.on):
        action()
        switch.current_state()
    return 0


if __name__ == "__main__":
    sys.exit(main())