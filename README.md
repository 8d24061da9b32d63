# sigtalk

Send a text message from one process to another using nothing but the
POSIX user signals. Every byte goes over as eight bits, most significant
first: `SIGUSR1` carries a 0 and `SIGUSR2` carries a 1. After each bit the
server answers with `SIGUSR1`, and the client waits for that answer before
it sends the next bit. A zero byte ends the message. The server then prints
a newline and answers the message's sender with `SIGUSR2`, which tells the
client the whole message has arrived.

This needs a POSIX system. The server waits for signals with
`signal.sigwaitinfo`, which Python provides on Linux but not on macOS.

## Install

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
until interrupted with Ctrl-C:

```
$ sigtalk-server
PID server: 41234
```

Send a message from a second terminal:

```
$ sigtalk-client 41234 "hello there"
total number of chars sent: 11
✅ Server acknowledged full message with SIGUSR2!
```

The count is the number of bytes of the message encoded for the file
system (UTF-8 on most systems). The server writes the bytes as they arrive,
then a newline when the message ends.

The client does nothing and exits quietly if it does not get exactly two
arguments, if the PID does not read as a positive number, if the message is
empty, or if the process cannot be signalled. The PID is read the way C's
`atoi` reads it: leading whitespace and a sign are accepted, and anything
after the digits is ignored.

## As a library

The wire format is in `sigtalk.protocol`:

```python
from sigtalk.protocol import MessageDecoder, message_bits

decoder = MessageDecoder()
received = [decoder.feed(bit) for bit in message_bits("hi")]
print([b for b in received if b is not None])  # [104, 105, 0]
```

- `byte_bits(byte)` gives the eight bits of one byte, most significant first.
- `message_bits(message)` gives an iterator over the bits of a whole message
  followed by the closing zero byte. A `str` is encoded as UTF-8; a message
  holding a zero byte raises `ValueError`.
- `MessageDecoder.feed(bit)` takes one bit and returns the byte it completes,
  or `None`; a returned 0 marks the end of a message. `pending_bits` tells how
  many bits of the current byte have arrived.

`sigtalk.client` has `parse_args(argv)`, which returns the pid and message or
raises `UsageError`, and `send_message(pid, message)`, which sends a message
to a running server and blocks until every acknowledgement arrives. It
raises `ProcessLookupError` or `PermissionError` when the pid cannot be
signalled.

`sigtalk.server.Server(out=None)` is the receiving side; it writes decoded
bytes to a binary stream (standard output by default). `handle(signum,
sender_pid)` processes one bit signal, and `serve_forever()` prints the
server's pid, blocks `SIGUSR1` and `SIGUSR2`, and handles them as they
arrive.

The package also has small helpers:

- `sigtalk.charclass`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`, on ASCII codes or one-character strings
- `sigtalk.numconv`: `atoi`, which wraps to a 32-bit signed result, and
  `itoa`
- `sigtalk.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`; text ends at its
  first `"\0"`, and positions come back as indices or `None`
- `sigtalk.transform`: `split`, `strmapi`, `striteri`, `strdup`
- `sigtalk.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, and `memmove(buf, dest, src, n)` with offsets into one buffer,
  on `bytes` and `bytearray`
- `sigtalk.linkedlist`: `Node` and `LinkedList`, with `add_front`,
  `add_back`, `last`, `pop_front`, `clear`, `for_each`, `len()` and iteration
- `sigtalk.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`

## What it does not do

The server decodes a single stream of bits. It does not keep messages from
different clients apart, so only one client should send at a time. There is
no timeout: a client whose server stops answering waits forever.

## Tests

```
pip install ".[test]"
pytest
```