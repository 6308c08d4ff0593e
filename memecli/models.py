"""Data model for meme templates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MemeTemplate:
    """A named piece of ASCII art with ``{{TOP}}``/``{{BOTTOM}}`` slots."""

    name: str
    ascii_art: str
    placeholder: str