"""Send a text message to a server process, one signal per bit.

A 0 bit is sent as SIGUSR1 and a 1 bit as SIGUSR2. After each bit the
client waits until the server acknowledges it with SIGUSR1; once the
closing NUL byte is through, it waits for SIGUSR2, the server's sign
that the whole message arrived.
"""

from __future__ import annotations

import contextlib
import os
import signal
import sys
import time
from collections.abc import Iterator, Sequence
from typing import Optional, Union

from .numconv import atoi
from .protocol import message_bits

_POLL_INTERVAL = 50e-6
_USAGE = "usage: client <server-pid> <message>"


class UsageError(ValueError):
    """The command line does not name a server and a message."""


class _Acks:
    """Acknowledgements received from the server."""

    def __init__(self) -> None:
        self.bit = False
        self.message = False

    def on_bit(self, signum, frame) -> None:
        self.bit = True

    def on_message(self, signum, frame) -> None:
        self.message = True


@contextlib.contextmanager
def _ack_handlers(acks: _Acks) -> Iterator[None]:
    previous_bit = signal.signal(signal.SIGUSR1, acks.on_bit)
    previous_message = signal.signal(signal.SIGUSR2, acks.on_message)
    try:
        yield
    finally:
        signal.signal(signal.SIGUSR1, previous_bit)
        signal.signal(signal.SIGUSR2, previous_message)


def _wait_until(predicate) -> None:
    while not predicate():
        time.sleep(_POLL_INTERVAL)


def parse_args(argv: Sequence[str]) -> tuple[int, str]:
    """Return the server pid and the message named by *argv*.

    *argv* holds the arguments without the program name. Raises
    :class:`UsageError` unless there are exactly two, the first reads as a
    positive number and the second is not empty.
    """
    args = list(argv)
    if len(args) != 2:
        raise UsageError(_USAGE)
    pid_text, message = args
    pid = atoi(pid_text)
    if pid <= 0:
        raise UsageError("the server pid must be a positive number")
    if not message:
        raise UsageError("the message must not be empty")
    return pid, message


def send_message(pid: int, message: Union[str, bytes]) -> None:
    """Send *message* to process *pid*, waiting for every acknowledgement.

    Raises ``ProcessLookupError`` or ``PermissionError`` when *pid* cannot
    be signalled, and ``ValueError`` for a message holding a NUL byte.
    """
    data = os.fsencode(message) if isinstance(message, str) else bytes(message)
    bits = message_bits(data)
    os.kill(pid, 0)
    acks = _Acks()
    with _ack_handlers(acks):
        for bit in bits:
            acks.bit = False
            os.kill(pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
            _wait_until(lambda: acks.bit)
        _wait_until(lambda: acks.message)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client command; exits quietly on bad arguments or an unknown pid."""
    args = sys.argv[1:] if argv is None else argv
    try:
        pid, message = parse_args(args)
    except UsageError:
        return 0
    data = os.fsencode(message)
    try:
        os.kill(pid, 0)
    except OSError:
        return 0
    print(f"total number of chars sent: {len(data)}", flush=True)
    send_message(pid, data)
    print("✅ Server acknowledged full message with SIGUSR2!", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())