"""Receive messages sent one signal per bit and print them.

SIGUSR1 carries a 0 bit and SIGUSR2 a 1 bit. Every signal is
acknowledged to its sender with SIGUSR1; when a message's closing NUL
byte arrives, a newline is printed and the message's sender is told so
with SIGUSR2.
"""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from collections.abc import Sequence
from typing import BinaryIO, Optional

from .protocol import END_OF_MESSAGE, MessageDecoder

_WATCHED = frozenset({signal.SIGUSR1, signal.SIGUSR2})


def _notify(pid: int, signum: int) -> None:
    """Signal *pid*, ignoring a sender that has gone away."""
    with contextlib.suppress(OSError):
        os.kill(pid, signum)


class Server:
    """Decodes incoming bit signals and writes the text to *out*."""

    def __init__(self, out: Optional[BinaryIO] = None) -> None:
        self._out = out if out is not None else sys.stdout.buffer
        self._decoder = MessageDecoder()
        self._sender_pid = 0

    def _write(self, data: bytes) -> None:
        self._out.write(data)
        self._out.flush()

    def handle(self, signum: int, sender_pid: int) -> None:
        """Process one bit signal *signum* sent by *sender_pid*."""
        if signum not in _WATCHED:
            raise ValueError(f"unexpected signal {signum}")
        if not self._sender_pid:
            self._sender_pid = sender_pid
        byte = self._decoder.feed(signum == signal.SIGUSR2)
        if byte is not None:
            if byte == END_OF_MESSAGE:
                self._write(b"\n")
                _notify(self._sender_pid, signal.SIGUSR2)
                self._sender_pid = 0
            else:
                self._write(bytes([byte]))
        _notify(sender_pid, signal.SIGUSR1)

    def serve_forever(self) -> None:
        """Print this process's pid, then handle bit signals until interrupted."""
        self._write(f"PID server: {os.getpid()}\n".encode("ascii"))
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _WATCHED)
        try:
            while True:
                info = signal.sigwaitinfo(_WATCHED)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server command until interrupted."""
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())