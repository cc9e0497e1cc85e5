"""Move catalog: the five castable moves and their prolonged effects.

The numbers here are the puzzle balance and must not change:

    Move       Cost  Instant                    Prolonged
    Strike       53  4 damage                   -
    Drain        73  2 damage, heal 2           -
    Guard       113  -                          Shield, 6 ticks, +7 armor
    Poison      173  -                          Poison, 6 ticks, 3 damage/tick
    Recharge    229  -                          Recharge, 5 ticks, +101 mana/tick
"""

from __future__ import annotations
from dataclasses import dataclass

from .errors import UnknownMoveError
from .models import DuelState, Effect, deal_damage


@dataclass(frozen=True)
class EffectSpec:
    """A standing modifier (armor) plus a per-tick payload (damage, mana)."""
    effect: Effect
    duration: int
    armor: int = 0
    damage_per_tick: int = 0
    mana_per_tick: int = 0

    def activate(self, state: DuelState) -> DuelState:
        state = state.with_timer(self.effect, self.duration)
        if self.armor:
            state = state.with_caster(armor=state.caster.armor + self.armor)
        return state

    def tick(self, state: DuelState) -> DuelState:
        if self.damage_per_tick:
            state = state.with_boss(hit_points=deal_damage(state.boss.hit_points, self.damage_per_tick))
        if self.mana_per_tick:
            state = state.with_caster(mana=state.caster.mana + self.mana_per_tick)
        return state

    def deactivate(self, state: DuelState) -> DuelState:
        if self.armor:
            state = state.with_caster(armor=state.caster.armor - self.armor)
        return state


EFFECTS = {
    Effect.SHIELD: EffectSpec(Effect.SHIELD, duration=6, armor=7),
    Effect.POISON: EffectSpec(Effect.POISON, duration=6, damage_per_tick=3),
    Effect.RECHARGE: EffectSpec(Effect.RECHARGE, duration=5, mana_per_tick=101),
}


@dataclass(frozen=True)
class Move:
    name: str
    cost: int
    damage: int = 0
    heal: int = 0
    effect: Effect | None = None

    def cast(self, state: DuelState) -> DuelState:
        """Pay for the move and apply its instant part or start its effect.

        Legality is the caller's concern; see turns.advance_caster.
        """
        state = state.with_caster(mana=state.caster.mana - self.cost)
        if self.damage:
            state = state.with_boss(hit_points=deal_damage(state.boss.hit_points, self.damage))
        if self.heal:
            state = state.with_caster(hit_points=state.caster.hit_points + self.heal)
        if self.effect is not None:
            state = EFFECTS[self.effect].activate(state)
        return state

    def __str__(self):
        return self.name


STRIKE = Move("Strike", 53, damage=4)
DRAIN = Move("Drain", 73, damage=2, heal=2)
GUARD = Move("Guard", 113, effect=Effect.SHIELD)
POISON = Move("Poison", 173, effect=Effect.POISON)
RECHARGE = Move("Recharge", 229, effect=Effect.RECHARGE)

MOVES = (STRIKE, DRAIN, GUARD, POISON, RECHARGE)

# Alternate names accepted by get_move.
_ALIASES = {
    "magic missile": STRIKE,
    "missile": STRIKE,
    "shield": GUARD,
}


def get_move(name: str) -> Move:
    """Look up a move by name, case-insensitively."""
    key = name.strip().lower()
    for move in MOVES:
        if move.name.lower() == key:
            return move
    try:
        return _ALIASES[key]
    except KeyError:
        raise UnknownMoveError(name) from None
