"""The built-in collection of meme templates."""

from __future__ import annotations

from collections.abc import Iterable

from .models import MemeTemplate

_PLACEHOLDER = "{{TOP}}\n{{BOTTOM}}"

_PARENS = ("(", ")")
_SLASHES = ("/", "\\")
_TRAILING_INDENT = 16


def _vessel(
    cap: str,
    cap_indent: int,
    top_sides: tuple[str, str],
    top_base: int,
    top_indents: Iterable[int],
    bottom_base: int,
    bottom_indents: Iterable[int],
    footer: str,
    footer_indent: int,
) -> str:
    """Draw a symmetric vessel: a cap, a widening top half, a narrowing bottom half, a footer.

    Each row's inner width is its base width minus twice its indent.
    """
    left, right = top_sides
    lines = ["", " " * cap_indent + cap]
    lines.extend(
        " " * indent + left + " " * (top_base - 2 * indent) + right
        for indent in top_indents
    )
    lines.extend(
        " " * indent + "\\" + " " * (bottom_base - 2 * indent) + "/"
        for indent in bottom_indents
    )
    lines.append(" " * footer_indent + footer)
    lines.append(" " * _TRAILING_INDENT)
    return "\n".join(lines)


_ROUND_FLASK = _vessel(
    ".-.", 17, _PARENS, 35, range(16, -1, -1), 35, range(1, 16), "`-'", 16
)
_NARROW_FLASK = _vessel(
    ".-.", 16, _PARENS, 33, range(15, -1, -1), 33, range(1, 16), "`-'", 16
)
_WIDE_DIAMOND = _vessel(
    ",--.", 17, _SLASHES, 36, range(16, -1, -1), 36, range(0, 17), "`--'", 17
)
_FLAT_TOP_BOTTLE = _vessel(
    "_" * 11,
    17,
    _SLASHES,
    43,
    range(16, 0, -1),
    41,
    range(0, 16),
    "\\" + "_" * 9 + "/",
    16,
)
_SKULL_DIAMOND = _vessel(
    ",--.", 17, _SLASHES, 36, range(16, 0, -1), 34, range(0, 17), "`-'", 17
)
_NARROW_DIAMOND = _vessel(
    ",--.", 16, _SLASHES, 34, range(15, 0, -1), 32, range(0, 16), "`-'", 16
)

_DEAL_WITH_IT = r"""
(•_•)
( •_•)>⌐■-■
(⌐■_■)   {{TOP}}
{{BOTTOM}}"""

_CAT_FEATURE = (
    "\n"
    " /\\_/\\  \n"
    "( o.o ) {{TOP}}\n"
    " > ^ <  \n"
    "{{BOTTOM}}"
)

_HELLO_WORLD = r"""
Small brain:       print("{{TOP}}")
Bigger brain:      echo "{{TOP}}"
Galaxy brain:      write-host "{{TOP}}"
Ascended being:    telnet towel.blinkenlights.nl"""

_CODING_LIFE = r"""
while (alive) {{
    {{TOP}}
    {{BOTTOM}}
    sleep();
}}"""

_CUTE_CAT = r"""
 ░░░░░░▄▄▄▄▀▀▀▀▀▀▀▀▄▄▄▄▄▄░░░░░░░
░░░░░█░░░░▒▒▒▒▒▒▒▒▒▒▒▒░░▀▀▄░░░░
░░░░█░░░▒▒▒▒▒▒░░░░░░░░░░░░▀▄░░
░░░█░░░░░░▄██▀▄▄░░░░░▄▄▄░░░░█░
░▄▀▒▄▄▄▒░█▀▀▀▀▄▄█░░░██▄▄█░░░░█
█░▒░░░█░█░░░░█░░░░░░░░░░░░░░░█
█░▒░░░█░█░░░░█░░░░░░░░░░░░░░░█
█░▒░░░█░░█▄▄▄█▄▄█░░░░░░░░░░░░█
█░▒░░░░█░░░░░░░░░░░░░░░░░░░░░█
░█░▒░░░▀▄░░░░░░░░░░░░░░░░░░░░░█
░░▀▄░░░░▀▄░░░░░░░░░░░░░░░░░░░░░█
{{TOP}}
{{BOTTOM}}"""

_CATALOGUE: tuple[tuple[str, str], ...] = (
    # Cider themes
    ("cider_bottle", _ROUND_FLASK),
    ("cider_glass", _ROUND_FLASK),
    ("cider_barrel", _ROUND_FLASK),
    ("cider_drink", _NARROW_FLASK),
    ("cider_bottle", _ROUND_FLASK),
    ("cider_drink", _WIDE_DIAMOND),
    ("cider_bottle", _FLAT_TOP_BOTTLE),
    # Brainrot themes
    ("brainrot", _ROUND_FLASK),
    ("brainrot_drink", _ROUND_FLASK),
    ("brainrot_skull", _SKULL_DIAMOND),
    ("brainrot_bottle", _NARROW_DIAMOND),
    # More cider art
    ("cider_drink", _ROUND_FLASK),
    ("cider_glass", _ROUND_FLASK),
    ("cider_barrel", _ROUND_FLASK),
    # Text templates
    ("deal_with_it", _DEAL_WITH_IT),
    ("cat_feature", _CAT_FEATURE),
    ("hello_world", _HELLO_WORLD),
    ("coding_life", _CODING_LIFE),
    ("cute_cat", _CUTE_CAT),
)


def load_templates() -> list[MemeTemplate]:
    """Return a fresh list of every built-in template, in catalogue order."""
    return [
        MemeTemplate(name=name, ascii_art=art, placeholder=_PLACEHOLDER)
        for name, art in _CATALOGUE
    ]