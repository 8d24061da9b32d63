import io
import signal
from unittest.mock import patch

import pytest

from sigtalk.client import UsageError, main, parse_args, send_message
from sigtalk.protocol import message_bits
from sigtalk.server import Server

SERVER_PID = 4242
CLIENT_PID = 4343


class _Loopback:
    """Routes kill() calls between a client and an in-process server."""

    def __init__(self, server):
        self.server = server
        self.sent = []

    def kill(self, pid, sig):
        if pid == SERVER_PID:
            if sig == 0:
                return
            self.sent.append(sig)
            self.server.handle(sig, CLIENT_PID)
        elif pid == CLIENT_PID:
            signal.getsignal(sig)(sig, None)
        else:
            raise ProcessLookupError(pid)


def test_parse_args_accepts_pid_and_message():
    assert parse_args(["42", "hi"]) == (42, "hi")


def test_parse_args_reads_pid_like_atoi():
    assert parse_args(["  +42abc", "x"]) == (42, "x")


@pytest.mark.parametrize(
    "argv",
    [[], ["42"], ["42", "a", "b"], ["0", "x"], ["-5", "x"], ["abc", "x"], ["42", ""]],
)
def test_parse_args_rejects_bad_command_lines(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_send_message_delivers_text_to_server():
    out = io.BytesIO()
    server = Server(out)
    loop = _Loopback(server)
    with patch("os.kill", loop.kill):
        send_message(SERVER_PID, "hello")
    assert out.getvalue() == b"hello\n"


def test_send_message_signals_match_bits():
    out = io.BytesIO()
    loop = _Loopback(Server(out))
    with patch("os.kill", loop.kill):
        send_message(SERVER_PID, b"ok")
    expected = [
        signal.SIGUSR2 if bit else signal.SIGUSR1 for bit in message_bits(b"ok")
    ]
    assert loop.sent == expected
    assert out.getvalue() == b"ok\n"


def test_send_message_restores_signal_handlers():
    before = (signal.getsignal(signal.SIGUSR1), signal.getsignal(signal.SIGUSR2))
    out = io.BytesIO()
    server = Server(out)
    loop = _Loopback(server)
    with patch("os.kill", loop.kill):
        send_message(SERVER_PID, "x")
    after = (signal.getsignal(signal.SIGUSR1), signal.getsignal(signal.SIGUSR2))
    assert out.getvalue() == b"x\n"
    assert after == before


def test_send_message_unknown_pid_raises():
    loop = _Loopback(Server(io.BytesIO()))
    with patch("os.kill", loop.kill), pytest.raises(ProcessLookupError):
        send_message(9999, "hello")
    assert loop.sent == []


def test_send_message_rejects_nul():
    loop = _Loopback(Server(io.BytesIO()))
    with patch("os.kill", loop.kill), pytest.raises(ValueError):
        send_message(SERVER_PID, b"a\x00b")


def test_main_reports_byte_count_and_acknowledgement(capsys):
    out = io.BytesIO()
    loop = _Loopback(Server(out))
    with patch("os.kill", loop.kill):
        status = main([str(SERVER_PID), "héllo"])
    captured = capsys.readouterr().out
    assert status == 0
    assert f"total number of chars sent: {len('héllo'.encode())}" in captured
    assert "Server acknowledged full message with SIGUSR2!" in captured
    assert out.getvalue() == "héllo".encode() + b"\n"


def test_main_bad_arguments_is_silent(capsys):
    assert main(["nonsense"]) == 0
    assert capsys.readouterr().out == ""


def test_main_unknown_pid_is_silent(capsys):
    loop = _Loopback(Server(io.BytesIO()))
    with patch("os.kill", loop.kill):
        status = main(["9999", "hello"])
    assert status == 0
    assert capsys.readouterr().out == ""
    assert loop.sent == []