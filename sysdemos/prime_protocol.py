"""Wire protocol shared by the prime-checking client and server.

A request is one signed 32-bit integer in network byte order.  A response
is a signed 32-bit length in host byte order followed by that many bytes
of text.
"""

import struct

PORT = 39000

_REQUEST = struct.Struct("!i")
_LENGTH = struct.Struct("=i")


class ConnectionClosed(ConnectionError):
    """The peer closed the connection before a whole message arrived."""


def check_prime(integer):
    """Return the sentence saying whether ``integer`` is prime.

    Only divisors from 2 up to half the number are tried, so 0, 1 and
    negative numbers are reported as prime.
    """
    has_divisor = any(integer % divisor == 0 for divisor in range(2, integer // 2 + 1))
    if has_divisor:
        return f"{integer} is not prime"
    return f"{integer} is prime"


def _recv_exact(sock, size):
    received = bytearray()
    while len(received) < size:
        chunk = sock.recv(size - len(received))
        if not chunk:
            raise ConnectionClosed(
                f"connection closed after {len(received)} of {size} bytes"
            )
        received += chunk
    return bytes(received)


def write_request(sock, integer):
    """Send ``integer`` as a request."""
    try:
        payload = _REQUEST.pack(integer)
    except struct.error as exc:
        raise ValueError(f"{integer} does not fit in a 32-bit request") from exc
    sock.sendall(payload)


def read_request(sock):
    """Receive one request and return its integer."""
    (integer,) = _REQUEST.unpack(_recv_exact(sock, _REQUEST.size))
    return integer


def write_response(sock, text):
    """Send ``text`` as a length-prefixed response."""
    data = text.encode("utf-8")
    sock.sendall(_LENGTH.pack(len(data)) + data)


def read_response(sock):
    """Receive one length-prefixed response and return its text."""
    (length,) = _LENGTH.unpack(_recv_exact(sock, _LENGTH.size))
    if length < 0:
        raise ValueError(f"negative response length {length}")
    return _recv_exact(sock, length).decode("utf-8")