"""A one-shot TCP server and client that exchange a single greeting."""

from __future__ import annotations

import argparse
import socket
import sys

DEFAULT_PORT = 8080
BUFFER_SIZE = 1023
SERVER_REPLY = "Hello from server"
CLIENT_MESSAGE = "Hello Server, this is Client"


def serve_once(server_socket: socket.socket, reply: str = SERVER_REPLY) -> str:
    """Accept one client on a listening socket, read its message and send ``reply``."""
    connection, _ = server_socket.accept()
    with connection:
        message = connection.recv(BUFFER_SIZE).decode("utf-8", errors="replace")
        connection.sendall(reply.encode("utf-8"))
    return message


def run_server(host: str = "", port: int = DEFAULT_PORT, reply: str = SERVER_REPLY) -> str:
    """Listen on ``host:port``, serve one client and return what it sent."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(5)
        print(f"Server listening on port {port}", flush=True)
        return serve_once(server, reply)


def run_client(host: str = "127.0.0.1", port: int = DEFAULT_PORT, message: str = CLIENT_MESSAGE) -> str:
    """Send ``message`` to the server and return its reply."""
    with socket.create_connection((host, port)) as connection:
        connection.sendall(message.encode("utf-8"))
        return connection.recv(BUFFER_SIZE).decode("utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Exchange one message over TCP.")
    parser.add_argument("role", choices=("server", "client"))
    parser.add_argument("--host")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--message")
    args = parser.parse_args(argv)

    try:
        if args.role == "server":
            received = run_server(args.host or "", args.port, args.message or SERVER_REPLY)
            if received:
                print(f"Client says: {received}")
        else:
            reply = run_client(args.host or "127.0.0.1", args.port, args.message or CLIENT_MESSAGE)
            if reply:
                print(f"Server replied: {reply}")
    except OSError as error:
        print(f"{args.role}: {error}", file=sys.stderr)
        return 1
    return 0