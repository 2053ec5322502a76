[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysdemos"
version = "0.1.0"
description = "Small systems-programming demos: a prime-checking TCP service, POSIX shared memory, counting sort and classic design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sockets",
    "shared-memory",
    "ipc",
    "sorting",
    "design-patterns",
    "examples",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysdemos-prime-server = "sysdemos.prime_server:main"
sysdemos-prime-client = "sysdemos.prime_client:main"
sysdemos-counting-sort = "sysdemos.counting_sort:main"
sysdemos-shm-write = "sysdemos.shared_memory:writer_main"
sysdemos-shm-read = "sysdemos.shared_memory:reader_main"
sysdemos-factory = "sysdemos.factory:main"
sysdemos-abstract-factory = "sysdemos.abstract_factory:main"
sysdemos-builder = "sysdemos.builder:main"
sysdemos-singleton = "sysdemos.singleton:main"
sysdemos-adapter = "sysdemos.adapter:main"
sysdemos-composite-safe = "sysdemos.composite_safe:main"
sysdemos-composite-transparent = "sysdemos.composite_transparent:main"
sysdemos-proxy = "sysdemos.proxy:main"
sysdemos-template-method = "sysdemos.template_method:main"
sysdemos-state = "sysdemos.state:main"
sysdemos-command = "sysdemos.command:main"
sysdemos-iterators = "sysdemos.iterators:main"

[tool.hatch.build.targets.wheel]
packages = ["sysdemos"]

[tool.pytest.ini_options]
addopts = "-ra"
