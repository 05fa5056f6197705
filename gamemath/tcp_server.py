"""Minimal TCP server: accept one client, print its message and acknowledge it."""

from __future__ import annotations

import socket
import sys
from typing import Optional, Sequence, TextIO

BUFFER_SIZE = 0xFF
BACKLOG = 5
REPLY = b"Received your message\0"


class ServerError(Exception):
    """A socket step of the server failed."""


def serve_once(port: int, output: Optional[TextIO] = None) -> str:
    """Listen on ``port``, handle a single client and return its message."""
    out = output if output is not None else sys.stdout
    try:
        server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        raise ServerError("ERROR, opening the socket") from exc

    with server:
        try:
            server.bind(("", port))
        except OSError as exc:
            raise ServerError("ERROR, binding socket") from exc
        server.listen(BACKLOG)

        out.write("about to call accept\n")
        out.flush()
        try:
            conn, _ = server.accept()
        except OSError as exc:
            raise ServerError("ERROR on accept") from exc
        out.write("accept returned\n")
        out.flush()

        with conn:
            try:
                data = conn.recv(BUFFER_SIZE - 1)
            except OSError as exc:
                raise ServerError("ERROR on read") from exc
            text = data.split(b"\0", 1)[0].decode("utf-8", errors="replace")
            out.write(f"=>{text}\n")
            out.flush()
            try:
                conn.sendall(REPLY)
            except OSError as exc:
                raise ServerError("ERROR writing to the socket") from exc
    return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``port``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("ERROR, no port provided", file=sys.stderr)
        return 1
    try:
        port = int(args[0])
    except ValueError:
        print("ERROR, no port provided", file=sys.stderr)
        return 1
    try:
        serve_once(port)
    except ServerError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())