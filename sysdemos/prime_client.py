"""Interactive client that asks the prime server about numbers."""

import socket
import sys

from .prime_protocol import read_response, write_request


def query(sock, numbers):
    """Send ``numbers`` in turn and return the server's answers.

    Sending stops after a zero, which ends the session; no answer is
    expected for it.
    """
    answers = []
    for number in numbers:
        write_request(sock, number)
        if number == 0:
            break
        answers.append(read_response(sock))
    return answers


def _prompted_numbers(stream):
    tokens = (token for line in stream for token in line.split())
    while True:
        print("Enter any number : ", flush=True)
        token = next(tokens, None)
        if token is None:
            yield 0
            return
        yield int(token)


def main(argv=None):
    """Connect to ``address port`` and ask about numbers read from stdin."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 1:
        print("\nInvalid no of args\nEnter Server's address")
        return 1
    if len(args) < 2:
        print("\nInvalid no of args\nEnter Port No")
        return 1
    address, port_text = args[0], args[1]
    try:
        port = int(port_text)
    except ValueError:
        print(f"\nInvalid port number: {port_text}")
        return 1

    try:
        with socket.create_connection((address, port)) as sock:
            for number in _prompted_numbers(sys.stdin):
                write_request(sock, number)
                if number == 0:
                    break
                print(read_response(sock), flush=True)
    except (OSError, ValueError) as exc:
        print(f"\nError: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())