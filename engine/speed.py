"""
speed.py — Speed → Delay Mapping
=================================
Speed is a user value in 1–100.  Each visualizer family maps it to the
pause between two step boundaries with

    delay_ms = max(minimum, base − speed · per_speed)

so a faster speed always means a shorter (or equal) delay.
"""

from dataclasses import dataclass
from typing import Dict, Union


MIN_SPEED = 1
MAX_SPEED = 100

# named presets → speed value
SPEED_PRESETS: Dict[str, int] = {
    "slow":   10,     # teaching mode
    "medium": 30,
    "fast":   70,     # demo mode
    "turbo":  100,
}


@dataclass(frozen=True)
class SpeedProfile:
    base:      float
    per_speed: float
    minimum:   float

    def delay_ms(self, speed: int) -> float:
        return max(self.minimum, self.base - clamp_speed(speed) * self.per_speed)


PROFILES: Dict[str, SpeedProfile] = {
    "sorting":     SpeedProfile(600, 6, 10),
    "searching":   SpeedProfile(800, 7, 100),
    "graph":       SpeedProfile(1000, 8, 200),
    "heap":        SpeedProfile(800, 7, 200),
    "trie":        SpeedProfile(800, 7, 200),
    "dp":          SpeedProfile(500, 4, 50),
    "linked_list": SpeedProfile(800, 7, 100),
    "tree":        SpeedProfile(500, 0, 500),     # traversal replay runs at a fixed pace
}


def clamp_speed(speed: int) -> int:
    return max(MIN_SPEED, min(MAX_SPEED, int(speed)))


def resolve_speed(raw: Union[int, str, None], default: int = SPEED_PRESETS["medium"]) -> int:
    """
    Accepts an int, a numeric string or a preset name.  Out-of-range
    numbers are clamped; anything unparseable raises ValueError.
    """
    if raw is None or raw == "":
        return clamp_speed(default)
    if isinstance(raw, str):
        key = raw.strip().lower()
        if key in SPEED_PRESETS:
            return SPEED_PRESETS[key]
        raw = int(key)
    if isinstance(raw, bool):
        raise ValueError("speed must be a number")
    return clamp_speed(raw)


def delay_ms(family: str, speed: int) -> float:
    return PROFILES[family].delay_ms(speed)
