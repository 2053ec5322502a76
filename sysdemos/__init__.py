"""Prime-checking TCP service, POSIX shared memory, counting sort and design-pattern demos."""

__version__ = "0.1.0"