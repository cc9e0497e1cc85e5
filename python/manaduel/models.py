"""Duel state model: caster and boss vitals, effect timers, difficulty.

Every type here is a frozen dataclass, so a DuelState can be used directly
as a dict key and heap entry by the search. Transitions build new values
with ``dataclasses.replace`` instead of mutating.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum


class Effect(IntEnum):
    """Prolonged effect kinds, in the order they tick each half-turn."""
    SHIELD = 0
    POISON = 1
    RECHARGE = 2


class Difficulty(IntEnum):
    NORMAL = 0
    HARD = 1


class Winner(Enum):
    CASTER = "caster"
    BOSS = "boss"


class DuelStatus(Enum):
    IN_PROGRESS = "in_progress"
    CASTER_WON = "caster_won"
    BOSS_WON = "boss_won"


def deal_damage(hit_points: int, damage: int) -> int:
    """Hit points left after taking `damage`; every hit deals at least 1."""
    return max(hit_points - max(damage, 1), 0)


def _check_non_negative(owner: str, **values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{owner}.{name} must be >= 0, got {value}")


@dataclass(frozen=True, order=True)
class Caster:
    hit_points: int
    armor: int = 0
    mana: int = 0

    def __post_init__(self):
        _check_non_negative("Caster", hit_points=self.hit_points, armor=self.armor, mana=self.mana)

    def __str__(self):
        plural = "s" if self.hit_points != 1 else ""
        return f"Caster has {self.hit_points} hit point{plural}, {self.armor} armor, {self.mana} mana"


@dataclass(frozen=True, order=True)
class Boss:
    hit_points: int
    damage: int

    def __post_init__(self):
        _check_non_negative("Boss", hit_points=self.hit_points, damage=self.damage)

    def __str__(self):
        return f"Boss has {self.hit_points} hit points"


@dataclass(frozen=True, order=True)
class EffectTimers:
    """Remaining ticks per effect, indexed by Effect. 0 means inactive."""
    remaining: tuple[int, ...] = (0,) * len(Effect)

    def __post_init__(self):
        if len(self.remaining) != len(Effect):
            raise ValueError(f"expected {len(Effect)} timers, got {len(self.remaining)}")
        if any(t < 0 for t in self.remaining):
            raise ValueError(f"timers must be >= 0, got {self.remaining}")

    def __getitem__(self, effect: Effect) -> int:
        return self.remaining[effect]

    def is_active(self, effect: Effect) -> bool:
        return self.remaining[effect] > 0

    def active(self) -> list[Effect]:
        return [e for e in Effect if self.remaining[e] > 0]

    def with_timer(self, effect: Effect, ticks: int) -> EffectTimers:
        timers = list(self.remaining)
        timers[effect] = ticks
        return EffectTimers(tuple(timers))


@dataclass(frozen=True, order=True)
class DuelState:
    """One node of the duel graph.

    Field order doubles as the deterministic tie-break order in the search
    frontier.
    """
    caster: Caster
    boss: Boss
    timers: EffectTimers = field(default_factory=EffectTimers)
    difficulty: Difficulty = Difficulty.NORMAL

    @property
    def winner(self) -> Winner | None:
        # Boss death is checked first: a killing blow ends the duel before
        # any retaliation matters.
        if self.boss.hit_points == 0:
            return Winner.CASTER
        if self.caster.hit_points == 0:
            return Winner.BOSS
        return None

    @property
    def status(self) -> DuelStatus:
        winner = self.winner
        if winner is Winner.CASTER:
            return DuelStatus.CASTER_WON
        if winner is Winner.BOSS:
            return DuelStatus.BOSS_WON
        return DuelStatus.IN_PROGRESS

    def with_caster(self, **changes) -> DuelState:
        return replace(self, caster=replace(self.caster, **changes))

    def with_boss(self, **changes) -> DuelState:
        return replace(self, boss=replace(self.boss, **changes))

    def with_timer(self, effect: Effect, ticks: int) -> DuelState:
        return replace(self, timers=self.timers.with_timer(effect, ticks))
