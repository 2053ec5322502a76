"""Named POSIX shared-memory objects: a writer fills one, a reader drains it."""

import mmap
import os
import sys
from pathlib import Path

SHM_DIR = Path("/dev/shm")
SHM_SIZE = 64


def _shm_path(name):
    stripped = name.lstrip("/")
    if not stripped or "/" in stripped:
        raise ValueError(f"invalid shared memory name: {name!r}")
    return SHM_DIR / stripped


def write_pattern(name, size=SHM_SIZE):
    """Create or open the object ``name``, size it and fill it.

    Byte ``i`` holds ``i + 48`` (so the object starts with the digits).
    Returns the bytes written.  The object is left in place for a reader.
    """
    if size <= 0:
        raise ValueError("shared memory size must be positive")
    path = _shm_path(name)
    data = bytes((index + 48) % 256 for index in range(size))
    fd = os.open(path, os.O_CREAT | os.O_RDWR, 0o700)
    try:
        os.ftruncate(fd, size)
        with mmap.mmap(fd, size) as region:
            region[:] = data
    finally:
        os.close(fd)
    return data


def read_and_unlink(name):
    """Return the whole content of the object ``name`` and remove it."""
    path = _shm_path(name)
    fd = os.open(path, os.O_RDONLY)
    try:
        size = os.fstat(fd).st_size
        with mmap.mmap(fd, size, access=mmap.ACCESS_READ) as region:
            data = bytes(region)
    finally:
        os.close(fd)
    os.unlink(path)
    return data


def _check_args(argv):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Wrong no of arguments")
        print("After exe give one shared memory argument path")
        return None
    return args[0]


def writer_main(argv=None):
    """Fill the shared memory object named on the command line."""
    name = _check_args(argv)
    if name is None:
        return 1
    try:
        write_pattern(name)
    except (OSError, ValueError) as exc:
        print("Unable to create shared memory object descriptor")
        print(f" ERROR: {exc}", file=sys.stderr)
        return 1
    print()
    return 0


def reader_main(argv=None):
    """Print and remove the shared memory object named on the command line."""
    name = _check_args(argv)
    if name is None:
        return 1
    try:
        data = read_and_unlink(name)
    except OSError as exc:
        print("Unable to open shared memory object descriptor")
        print(f" ERROR: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print("Unable to map shared memory object ")
        print(f" ERROR: {exc}", file=sys.stderr)
        return 1
    print(data.decode("latin-1"))
    return 0


if __name__ == "__main__":
    sys.exit(writer_main())