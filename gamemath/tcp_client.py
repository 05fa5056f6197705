"""Minimal TCP client: send one line, then print every reply."""

from __future__ import annotations

import os
import socket
import sys
import time
from typing import List, Optional, Sequence, TextIO, Union

BUFFER_SIZE = 256
PROMPT = "Please enter the message:"


class ClientError(Exception):
    """A socket step of the client failed."""


def _first_line(message: Union[str, bytes]) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    newline = data.find(b"\n")
    if newline != -1:
        data = data[: newline + 1]
    return data[: BUFFER_SIZE - 2]


def run_client(
    host: str,
    port: int,
    message: Optional[Union[str, bytes]] = None,
    output: Optional[TextIO] = None,
) -> List[str]:
    """Connect, send one line and print replies until the server closes.

    When ``message`` is None the line is read from standard input after a
    prompt.  Each reply is cut at its first NUL byte.  Returns the replies.
    """
    out = output if output is not None else sys.stdout
    try:
        address = socket.gethostbyname(host)
    except OSError as exc:
        raise ClientError(f"Client:gethostbyname: {exc}") from exc
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        raise ClientError(f"Opening socket: {exc}") from exc

    replies: List[str] = []
    with sock:
        try:
            sock.connect((address, port))
        except OSError as exc:
            raise ClientError(f"Client:connect: {exc}") from exc

        if message is None:
            out.write(PROMPT)
            out.flush()
            message = sys.stdin.readline()
        try:
            sock.sendall(_first_line(message))
        except OSError as exc:
            raise ClientError(f"Client:write: {exc}") from exc

        while True:
            try:
                chunk = sock.recv(BUFFER_SIZE - 1)
            except OSError as exc:
                raise ClientError(f"Client:read: {exc}") from exc
            if not chunk:
                break
            text = chunk.split(b"\0", 1)[0].decode("utf-8", errors="replace")
            out.write(text + "\n")
            out.flush()
            replies.append(text)
            time.sleep(0.01)
    return replies


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``hostname port``."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "tcp_client"
    if len(args) < 2:
        print(f"usage {prog} hostname port", file=sys.stderr)
        return 1
    try:
        port = int(args[1])
    except ValueError:
        print(f"usage {prog} hostname port", file=sys.stderr)
        return 1
    try:
        run_client(args[0], port)
    except ClientError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())