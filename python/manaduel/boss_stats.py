"""Boss stats input: parse the two-line ``Key: value`` block.

    Hit Points: 51
    Damage: 9

Keys may appear in any order and surrounding whitespace is ignored.
"""

from __future__ import annotations
from pathlib import Path

from .errors import BossStatsError
from .models import Boss

HIT_POINTS_KEY = "Hit Points"
DAMAGE_KEY = "Damage"


def parse_attributes(text: str) -> dict[str, int]:
    attributes = {}
    for lineno, line in enumerate(text.strip().splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        name, sep, value = line.partition(":")
        if not sep:
            raise BossStatsError(f"line {lineno}: expected 'name: value', got {line!r}")
        try:
            attributes[name.strip()] = int(value.strip())
        except ValueError:
            raise BossStatsError(f"line {lineno}: {value.strip()!r} is not an integer") from None
    return attributes


def parse_boss(text: str) -> Boss:
    attributes = parse_attributes(text)
    for key in (HIT_POINTS_KEY, DAMAGE_KEY):
        if key not in attributes:
            raise BossStatsError(f"{key.lower()} not defined")
    try:
        return Boss(hit_points=attributes[HIT_POINTS_KEY], damage=attributes[DAMAGE_KEY])
    except ValueError as e:
        raise BossStatsError(str(e)) from e


def read_boss(path) -> Boss:
    """Read and parse boss stats from a file. OSError propagates."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise BossStatsError(f"{path}: not valid UTF-8 text ({e.reason} at byte {e.start})") from e
    return parse_boss(text)
