from __future__ import annotations

import logging
import socket
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)


class RecordSink(Protocol):
    def write(self, record: str) -> None: ...


class UdpSink:
    """Fire-and-forget datagram sink.

    A new socket is opened and closed per record; nothing is acknowledged and
    send failures are only logged.
    """

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = int(port)

    def write(self, record: str) -> None:
        payload = record.encode("ascii")
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.connect((self.host, self.port))
                sock.send(payload)
        except OSError as e:
            logger.debug("UDP send to %s:%d failed: %s", self.host, self.port, e)


class FileSink:
    """Appends one record per line to an already-open text handle."""

    def __init__(self, handle: TextIO) -> None:
        self._handle = handle

    def write(self, record: str) -> None:
        self._handle.write(f"{record}\n")


class RecordingSink:
    def __init__(self) -> None:
        self.records: list[str] = []

    def write(self, record: str) -> None:
        self.records.append(record)
