"""TCP server that answers whether numbers are prime."""

import socket
import sys

from .prime_protocol import (
    PORT,
    ConnectionClosed,
    check_prime,
    read_request,
    write_response,
)


def handle_connection(conn, out):
    """Answer requests on ``conn`` until a zero arrives or the peer leaves.

    Each answer is also written to ``out``.  Returns the number of
    requests answered.
    """
    answered = 0
    while True:
        try:
            integer = read_request(conn)
        except ConnectionClosed:
            break
        if integer == 0:
            break
        text = check_prime(integer)
        print(text, file=out, flush=True)
        write_response(conn, text)
        answered += 1
    return answered


def serve(listener, out):
    """Accept connections on ``listener`` forever, one at a time."""
    while True:
        conn, _ = listener.accept()
        with conn:
            handle_connection(conn, out)


def main(argv=None):
    """Run the server on the fixed port on every interface."""
    print("Starting Server : ", flush=True)
    try:
        with socket.create_server(("", PORT), backlog=5) as listener:
            serve(listener, sys.stdout)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"server error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())