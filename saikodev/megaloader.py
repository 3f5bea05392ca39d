"""Upload a ROM image to a Mega EverDrive cartridge over a serial port."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

BLOCK_SIZE = 65536
MAX_ROM_SIZE = 0xF00000
PAD_VALUE = 0xFF

RESET_COMMAND = b"    *T"
GAME_COMMAND = b"*g"

_RUN_COMMANDS = {
    "sms": b"*rs",
    "os": b"*ro",
    "cd": b"*rc",
    "m10": b"*rM",
    "md": b"*rm",
}

USAGE = (
    "Usage: megaloader <image type> <rom image> <serial port device>\n"
    "Supported image types:\n"
    "sms\tos\tcd\tm10\tmd\n"
    "(use md if you're not sure)\n"
)


class LoaderError(Exception):
    """Raised when the cartridge cannot be loaded."""


class Port(Protocol):
    def read(self, size: int) -> bytes: ...

    def write(self, data: bytes) -> int | None: ...


def run_command(image_type: str) -> bytes:
    """Return the run command for an image type."""
    try:
        return _RUN_COMMANDS[image_type]
    except KeyError:
        raise LoaderError("invalid image type specified.") from None


def pad_rom(data: bytes) -> bytes:
    """Pad ``data`` with 0xFF to a whole number of 64 KiB blocks."""
    if len(data) > MAX_ROM_SIZE:
        raise LoaderError("ROM file too big for MED!")
    remainder = len(data) % BLOCK_SIZE
    if remainder == 0:
        return bytes(data)
    return bytes(data) + bytes([PAD_VALUE]) * (BLOCK_SIZE - remainder)


class _SerialPort:
    """A raw serial device opened by file descriptor."""

    def __init__(self, fd: int) -> None:
        self._fd = fd

    def read(self, size: int) -> bytes:
        return os.read(self._fd, size)

    def write(self, data: bytes) -> int:
        return os.write(self._fd, data)

    def flush(self) -> None:
        import termios

        termios.tcdrain(self._fd)

    def close(self) -> None:
        os.close(self._fd)

    def __enter__(self) -> _SerialPort:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_serial(path: str) -> _SerialPort:
    """Open a serial device, flush it and switch it to raw mode."""
    import termios
    import tty

    try:
        fd = os.open(path, os.O_RDWR | getattr(os, "O_NOCTTY", 0))
    except OSError as exc:
        raise LoaderError(f"failed to open serial port {path}") from exc
    try:
        try:
            termios.tcflush(fd, termios.TCIOFLUSH)
        except termios.error as exc:
            raise LoaderError("failed to flush port") from exc
        tty.setraw(fd, termios.TCSANOW)
    except BaseException:
        os.close(fd)
        raise
    return _SerialPort(fd)


class MedLoader:
    """Speaks the cartridge's upload protocol over a byte port."""

    def __init__(self, port: Port) -> None:
        self._port = port

    def _send(self, data: bytes, what: str) -> None:
        written = self._port.write(data)
        if written != len(data):
            raise LoaderError(f"failed to send {what}")

    def _drain(self) -> None:
        flush = getattr(self._port, "flush", None)
        if flush is not None:
            flush()

    def _expect(self, expected: bytes, what: str) -> None:
        got = self._port.read(1)
        if len(got) != 1:
            raise LoaderError(f"failed to read response to {what}")
        if got != expected:
            raise LoaderError(
                f"received incorrect response to {what}: "
                f"expected {expected.decode()!r}, got {got!r}"
            )

    def load(self, rom: bytes, image_type: str = "md") -> None:
        """Upload ``rom`` and start it as ``image_type``."""
        run = run_command(image_type)
        padded = pad_rom(rom)
        blocks = len(padded) // BLOCK_SIZE
        logger.info("ROM size sent will be %d, in %d blocks.", len(padded), blocks)

        self._send(RESET_COMMAND, "reset command")
        self._drain()
        self._expect(b"k", "reset command")
        logger.info("Reset command sent; response OK.")

        self._send(GAME_COMMAND, "game command")
        self._send(bytes([blocks]), "ROM size")
        self._drain()
        self._expect(b"k", "game command")
        logger.info("Game and ROM size commands sent; response OK. Sending blocks.")

        for number, start in enumerate(range(0, len(padded), BLOCK_SIZE), 1):
            logger.info("Sending block %d of %d...", number, blocks)
            self._send(padded[start:start + BLOCK_SIZE], "block")
            self._drain()
        logger.info("done sending blocks...")

        self._expect(b"d", "blocks")
        logger.info("Block data sent, response OK.")

        self._send(run, "run command")
        self._expect(b"k", "run command")
        logger.info("Run command sent.")


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print(USAGE)
        return 0
    image_type, rom_path, port_path = args
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stdout)
    try:
        run_command(image_type)
        try:
            rom = Path(rom_path).read_bytes()
        except OSError:
            raise LoaderError(f"failed to open ROM image {rom_path}") from None
        pad_rom(rom)
        print("ROM read successfully.")
        with open_serial(port_path) as port:
            print("Serial port opened.")
            MedLoader(port).load(rom, image_type)
    except LoaderError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())