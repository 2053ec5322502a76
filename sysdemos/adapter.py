"""Adapter: make a specific database fit a generic connection interface."""

import sys
from abc import ABC, abstractmethod

_MAX_PORT = 2**32 - 1


def _emit(out, text):
    print(text, file=out if out is not None else sys.stdout)


class SpecificDB:
    """A database with its own initialisation call."""

    def __init__(self, out=None):
        self.out = out

    def init_db(self, ip, port):
        """Start the database at ``ip:port`` and return the report line."""
        message = f"Specific DB initializing with {ip}:{port}"
        _emit(self.out, message)
        return message


class DBConnection(ABC):
    """The interface an application expects from a database connection."""

    @abstractmethod
    def initialize(self, ip, port):
        """Remember where the database lives."""

    def connect_db(self):
        """Connect to the database; does nothing by default."""
        return None


class _SettingsAdapter(DBConnection):
    def __init__(self, out=None):
        self.out = out
        self.ip = None
        self.port = None

    def initialize(self, ip, port):
        if not 0 <= port <= _MAX_PORT:
            raise ValueError(f"port {port} outside 0..{_MAX_PORT}")
        _emit(self.out, "Initializing DB")
        self.ip = ip
        self.port = port

    def _settings(self):
        if self.ip is None:
            raise RuntimeError("connection has not been initialized")
        return self.ip, self.port


class ClassDBConnectionAdapter(_SettingsAdapter, SpecificDB):
    """Adapts by inheriting the specific database's implementation."""

    def connect_db(self):
        ip, port = self._settings()
        return self.init_db(ip, port)


class ObjectDBConnectionAdapter(_SettingsAdapter):
    """Adapts by delegating to a specific database it is given."""

    def __init__(self, specific_db, out=None):
        super().__init__(out)
        self.specific_db = specific_db

    def connect_db(self):
        ip, port = self._settings()
        return self.specific_db.init_db(ip, port)


class MyApplication:
    """An application that only knows the generic connection interface."""

    def __init__(self, db):
        self.db = db

    def connect_with_db(self):
        return self.db.connect_db()


def main(argv=None):
    """Connect an application through each kind of adapter."""
    class_adapter = ClassDBConnectionAdapter()
    class_adapter.initialize("127.0.0.1", 4568)
    MyApplication(class_adapter).connect_with_db()

    object_adapter = ObjectDBConnectionAdapter(SpecificDB())
    object_adapter.initialize("127.0.0.1", 4568)
    MyApplication(object_adapter).connect_with_db()
    return 0


if __name__ == "__main__":
    sys.exit(main())