"""Command: requests wrapped as objects that an invoker runs."""

import sys
from abc import ABC, abstractmethod


def _emit(out, text):
    print(text, file=out if out is not None else sys.stdout)
    return text


class Document(ABC):
    """A document that supports the basic editing operations."""

    @abstractmethod
    def open(self):
        """Open the document."""

    @abstractmethod
    def close(self):
        """Close the document."""

    @abstractmethod
    def copy(self):
        """Copy from the document."""

    @abstractmethod
    def paste(self):
        """Paste into the document."""


class _ReportingDocument(Document):
    _kind = ""

    def __init__(self, out=None):
        self.out = out

    def _operation(self, name):
        return _emit(self.out, f"{self._kind} Document {name} operation")

    def open(self):
        return self._operation("open")

    def close(self):
        return self._operation("close")

    def copy(self):
        return self._operation("copy")

    def paste(self):
        return self._operation("paste")


class TextDocument(_ReportingDocument):
    _kind = "Text"


class GraphicDocument(_ReportingDocument):
    _kind = "Graphic"


class Command(ABC):
    """A request that can be executed later."""

    @abstractmethod
    def execute(self):
        """Carry out the request and return its result."""


class _DocumentCommand(Command):
    def __init__(self, document):
        self.document = document


class OpenCommand(_DocumentCommand):
    def execute(self):
        return self.document.open()


class CloseCommand(_DocumentCommand):
    def execute(self):
        return self.document.close()


class CopyCommand(_DocumentCommand):
    def execute(self):
        return self.document.copy()


class PasteCommand(_DocumentCommand):
    def execute(self):
        return self.document.paste()


class SimpleCommand(Command):
    """Runs one method, given unbound, on a receiver."""

    def __init__(self, receiver, action):
        self.receiver = receiver
        self.action = action

    def execute(self):
        return self.action(self.receiver)


class Zoom:
    """A receiver with no command classes of its own."""

    def __init__(self, out=None):
        self.out = out

    def zoom_in(self):
        return _emit(self.out, "Zoom In")

    def zoom_out(self):
        return _emit(self.out, "Zoom Out")


class MacroCommand(Command):
    """A sequence of commands run in the order they were added."""

    def __init__(self, commands=()):
        self._commands = list(commands)

    @property
    def commands(self):
        return tuple(self._commands)

    def add(self, command):
        self._commands.append(command)

    def remove(self, command):
        """Remove every occurrence of ``command``; absent ones are ignored."""
        self._commands = [held for held in self._commands if held is not command]

    def execute(self):
        return [command.execute() for command in self._commands]


class CommandInvoker:
    """Holds one command and runs it on request."""

    def __init__(self, command=None):
        self.command = command

    def execute(self):
        if self.command is None:
            raise RuntimeError("no command has been set")
        return self.command.execute()


def _run_session(document):
    invoker = CommandInvoker()
    zoom = Zoom()
    commands = [
        OpenCommand(document),
        SimpleCommand(zoom, Zoom.zoom_in),
        SimpleCommand(zoom, Zoom.zoom_out),
        MacroCommand([CopyCommand(document), PasteCommand(document)]),
        CloseCommand(document),
    ]
    for command in commands:
        invoker.command = command
        invoker.execute()


def main(argv=None):
    """Drive a text and a graphic document through the same commands."""
    print("=== For Text Document ===")
    _run_session(TextDocument())
    print("\n=== For Graphic Document ===")
    _run_session(GraphicDocument())
    return 0


if __name__ == "__main__":
    sys.exit(main())