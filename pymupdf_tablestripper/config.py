"""Configuration for controlling table inference."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Optional

import pymupdf  # type: ignore

from .geometry_utils import RectLike, ensure_rect
from .labeler import Origin

DX_ENV = "PYMUPDF_TABLESTRIPPER_DX"
DY_ENV = "PYMUPDF_TABLESTRIPPER_DY"


@dataclass(frozen=True, slots=True)
class StripperConfig:
    """Settings fixed for one extraction run.

    Attributes:
        dx: Horizontal padding used when deciding whether glyphs touch.
            Columns need a visible gap wider than this to stay apart.
        dy: Vertical padding. Rows of text tend to overlap already, so this
            is usually zero.
        region: Optional clip; glyphs whose anchor point falls outside it
            are never clustered. ``None`` means the whole page.
        origin: Corner of the page the glyph coordinates are measured from.
        until_stable: Re-test merged boxes until no further merge happens.
            Turning it off gives the faster single-pass merge, whose result
            can depend on glyph order.
        skip_whitespace: Drop whitespace glyphs before clustering.
        verbose: Enable debug logging for the whole package.
    """

    dx: float = 1.0
    dy: float = 0.0
    region: Optional[RectLike] = None
    origin: Origin = Origin.TOP_LEFT
    until_stable: bool = True
    skip_whitespace: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.dx < 0 or self.dy < 0:
            raise ValueError(
                f"padding must be non-negative (dx={self.dx}, dy={self.dy})"
            )

    def clip_rect(self) -> Optional["pymupdf.Rect"]:
        """Return the configured region as a ``pymupdf.Rect`` if supplied."""
        if self.region is None:
            return None
        return ensure_rect(self.region)

    @classmethod
    def from_env(cls, **overrides: Any) -> StripperConfig:
        """Build a config from environment variables plus explicit overrides."""
        values: dict[str, Any] = {}
        for key, env_name in (("dx", DX_ENV), ("dy", DY_ENV)):
            raw = os.environ.get(env_name)
            if raw is None or raw.strip() == "":
                continue
            try:
                values[key] = float(raw)
            except ValueError as exc:
                raise ValueError(f"{env_name} must be a number, got {raw!r}") from exc
        values.update(overrides)
        return cls(**values)


__all__ = ["StripperConfig"]
