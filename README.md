# sysdemos

A collection of small, self-contained programs covering everyday systems
topics and the classic object-oriented design patterns. Each program is both
an importable module and a command-line tool. There are no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Prime-checking service

A TCP server answers "is this number prime?" over a small binary protocol.
A request is one signed 32-bit integer in network (big-endian) byte order.
A response is a signed 32-bit length in the host's byte order followed by
that many bytes of UTF-8 text, such as `7 is prime` or `8 is not prime`.
Sending `0` ends the conversation and gets no answer.

Only divisors from 2 up to half the number are tried, so `check_prime`
reports 1 and negative numbers as prime.

Start the server (it listens on port 39000 on all interfaces and prints each
answer it sends):

```
sysdemos-prime-server
```

Connect a client, giving the server address and port, then type numbers.
End of input sends `0` and closes the session.

```
sysdemos-prime-client 127.0.0.1 39000
```

The protocol pieces live in `sysdemos.prime_protocol`: `check_prime`,
`write_request`, `read_request`, `write_response`, `read_response`, the
`PORT` constant and the `ConnectionClosed` exception raised when the peer
goes away mid-message. `write_request` raises `ValueError` for numbers that
do not fit in 32 bits.

`sysdemos.prime_server.handle_connection(conn, out)` answers requests on one
socket and returns how many it answered; `sysdemos.prime_server.serve(listener, out)`
accepts connections forever, one at a time. `sysdemos.prime_client.query(sock, numbers)`
sends numbers in turn and returns the answers, stopping after a zero.

## Counting sort

```
sysdemos-counting-sort
```

Reads the number of elements and then the elements themselves from standard
input and prints them sorted. At most 100 elements are accepted.

From Python, `sysdemos.counting_sort.counting_sort(values, max_value=None)`
returns a new sorted list. Every value must lie in `0..max_value`;
`max_value` defaults to the largest value and may not exceed 1000. Anything
outside these limits raises `ValueError`.

## POSIX shared memory

The writer creates a named shared-memory object under `/dev/shm`, sizes it
to 64 bytes and fills it so that byte `i` holds `i + 48` — the characters
`'0'`, `'1'`, `'2'`, ... in sequence. The reader opens the same object,
prints its contents and removes it.

```
sysdemos-shm-write /demo_shm
sysdemos-shm-read /demo_shm
```

In code: `sysdemos.shared_memory.write_pattern(name, size=64)` returns the
bytes written, and `sysdemos.shared_memory.read_and_unlink(name)` returns the
object's content and removes it. A leading `/` in the name is optional; a
name with any other `/` raises `ValueError`.

## Design patterns

Every pattern module has a `main` that plays through a short scenario and
prints what happens; the classes can be used directly as well, and most take
an `out` stream for their messages.

| Command                          | Module                             | Pattern                                  |
|----------------------------------|------------------------------------|------------------------------------------|
| `sysdemos-factory`               | `sysdemos.factory`                 | Factory method (pizza stores)            |
| `sysdemos-abstract-factory`      | `sysdemos.abstract_factory`        | Abstract factory (ingredient factories)  |
| `sysdemos-builder`               | `sysdemos.builder`                 | Builder (a cook and pizza builders)      |
| `sysdemos-singleton`             | `sysdemos.singleton`               | Singleton, two styles                    |
| `sysdemos-adapter`               | `sysdemos.adapter`                 | Class and object adapters                |
| `sysdemos-composite-safe`        | `sysdemos.composite_safe`          | Composite, child management on composite |
| `sysdemos-composite-transparent` | `sysdemos.composite_transparent`   | Composite, uniform component interface   |
| `sysdemos-proxy`                 | `sysdemos.proxy`                   | Virtual proxy (lazily loaded images)     |
| `sysdemos-template-method`       | `sysdemos.template_method`         | Template method (sorting algorithms)     |
| `sysdemos-state`                 | `sysdemos.state`                   | State (an on/off switch)                 |
| `sysdemos-command`               | `sysdemos.command`                 | Command, macro command and invoker       |
| `sysdemos-iterators`             | `sysdemos.iterators`               | External, polymorphic and internal iterators |

`sysdemos-singleton` takes `classic`, `meyers` or both as arguments; with
none it runs both. The builder and singleton demos write their reports to
standard error.

A quick look from Python:

```python
from sysdemos.state import Switch

switch = Switch()
switch.on()                      # prints "Setting ON from OFF"
assert switch.current_state() == "ON"
```

```python
from sysdemos.factory import NyPizzaStore

pizza = NyPizzaStore().order_pizza("cheese")
print(pizza.name)                # New York Style Cheese Pizza
```

Ordering a kind a store does not make raises `ValueError`.

## What is not included

- The prime server handles one client at a time and has no command to stop
  it other than interrupting the process.
- Shared memory is limited to named objects under `/dev/shm`, so it works on
  Linux only. There are no message queues and no semaphores.