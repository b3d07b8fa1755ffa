"""Render quality settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class QualityOptions:
    """Samples per pixel, maximum bounce depth and image width."""

    samples_per_pixel: int = 100
    max_depth: int = 50
    img_width: int = 400

    DEFAULT: ClassVar[QualityOptions]


QualityOptions.DEFAULT = QualityOptions()