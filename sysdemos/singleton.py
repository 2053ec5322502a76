"""Two singletons holding one integer: lazily created, and lock-guarded."""

import sys
import threading


class _SingleValue:
    """An object holding one integer that cannot be built or copied directly."""

    def __init__(self, *args, **kwargs):
        raise TypeError(f"use {type(self).__name__}.instance()")

    @classmethod
    def _create(cls):
        obj = object.__new__(cls)
        obj.value = 0
        return obj

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")


class ClassicSingleton(_SingleValue):
    """Created on first use; not guarded against concurrent first use."""

    _instance = None

    @classmethod
    def instance(cls):
        if ClassicSingleton._instance is None:
            ClassicSingleton._instance = cls._create()
        return ClassicSingleton._instance


class MeyersSingleton(_SingleValue):
    """Created on first use, exactly once even across threads."""

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def instance(cls):
        if MeyersSingleton._instance is None:
            with MeyersSingleton._lock:
                if MeyersSingleton._instance is None:
                    MeyersSingleton._instance = cls._create()
        return MeyersSingleton._instance


def _report(function_name, singleton_class, out):
    value = singleton_class.instance().value
    print(
        f"{function_name} singleton instance value is {value}",
        file=out if out is not None else sys.stderr,
    )
    return value


def foo(singleton_class, out=None):
    """Set the shared value to 1, report it and return it."""
    singleton_class.instance().value = 1
    return _report("foo", singleton_class, out)


def bar(singleton_class, out=None):
    """Set the shared value to 2, report it and return it."""
    singleton_class.instance().value = 2
    return _report("bar", singleton_class, out)


_CLASSES = {"classic": ClassicSingleton, "meyers": MeyersSingleton}


def main(argv=None):
    """Show the shared value as foo and bar change it.

    Arguments choose ``classic`` and/or ``meyers``; with none, both run.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    names = args or list(_CLASSES)
    unknown = [name for name in names if name not in _CLASSES]
    if unknown:
        print(f"unknown singleton: {', '.join(unknown)}", file=sys.stderr)
        return 1
    for name in names:
        singleton_class = _CLASSES[name]
        _report("main", singleton_class, None)
        foo(singleton_class)
        _report("main", singleton_class, None)
        bar(singleton_class)
        _report("main", singleton_class, None)
    return 0


if __name__ == "__main__":
    sys.exit(main())