"""Output of finished images and of debugging text."""

from __future__ import annotations

import os
import threading
from typing import TextIO

from raytracer.color import Pixel


class ImgWriter:
    """Collects pixels in any order and writes them as a plain PPM image."""

    def __init__(self, stream: TextIO, img_width: int, img_height: int) -> None:
        self._stream = stream
        self.img_width = img_width
        self._done: list[Pixel] = []
        stream.write(f"P3\n{img_width} {img_height}\n255\n")

    def write(self, pixel: Pixel) -> None:
        self._done.append(pixel)

    def flush(self) -> None:
        """Write every collected pixel in row-major order."""
        for pixel in sorted(self._done, key=lambda p: p.index(self.img_width)):
            self._stream.write(pixel.color.to_ppm())
        self._done.clear()
        self._stream.flush()


class DebugWriter:
    """A text file that values are appended to."""

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self._handle = open(filename, "w", encoding="utf-8")

    def write(self, value: object) -> None:
        self._handle.write(str(value))

    def writeln(self, value: object) -> None:
        self._handle.write(f"{value}\n")

    def flush(self) -> None:
        self._handle.flush()

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> DebugWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class Debugger:
    """A debug file that may be written from several threads."""

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self._writer = DebugWriter(filename)
        self._lock = threading.Lock()

    def write(self, value: object) -> None:
        with self._lock:
            self._writer.write(value)

    def writeln(self, value: object) -> None:
        with self._lock:
            self._writer.writeln(value)

    def close(self) -> None:
        with self._lock:
            self._writer.close()

    def __enter__(self) -> Debugger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()