"""Turn engine: pure half-turn transitions over DuelState.

A round is the caster's half-turn followed by the boss's half-turn. Each
half-turn first ticks the active effects (Shield, Poison, Recharge in that
order), then the acting side moves. The duel stops the moment either side
reaches 0 hit points, so every step returns ``(next_state, winner)`` and
later steps are skipped once a winner exists.

Illegal half-turns raise an IllegalMoveError subclass and leave nothing
behind: the input state is never modified.
"""

from __future__ import annotations
from typing import Optional

from .errors import EffectAlreadyActiveError, GameFinishedError, InsufficientManaError
from .models import Difficulty, DuelState, Effect, Winner, deal_damage
from .moves import EFFECTS, Move

HARD_MODE_DAMAGE = 1

Outcome = tuple[DuelState, Optional[Winner]]


def _require_in_progress(state: DuelState) -> None:
    winner = state.winner
    if winner is not None:
        raise GameFinishedError(winner)


def check_castable(state: DuelState, move: Move) -> None:
    """Raise if `move` cannot be cast from `state`.

    An effect with exactly 1 tick left is allowed: it expires during this
    half-turn's tick phase, before the new cast takes hold.
    """
    if move.cost > state.caster.mana:
        raise InsufficientManaError(move, state.caster.mana)
    if move.effect is not None:
        remaining = state.timers[move.effect]
        if remaining > 1:
            raise EffectAlreadyActiveError(move, remaining)


def apply_effects(state: DuelState) -> Outcome:
    """Tick every active effect once, stopping at the first death."""
    for effect in Effect:
        if not state.timers.is_active(effect):
            continue
        spec = EFFECTS[effect]
        remaining = state.timers[effect] - 1
        state = spec.tick(state.with_timer(effect, remaining))
        if remaining == 0:
            state = spec.deactivate(state)
        winner = state.winner
        if winner is not None:
            return state, winner
    return state, None


def advance_caster(state: DuelState, move: Move) -> Outcome:
    _require_in_progress(state)

    if state.difficulty == Difficulty.HARD:
        state = state.with_caster(hit_points=deal_damage(state.caster.hit_points, HARD_MODE_DAMAGE))
        if state.winner is not None:
            return state, state.winner

    check_castable(state, move)

    state, winner = apply_effects(state)
    if winner is not None:
        return state, winner

    state = move.cast(state)
    return state, state.winner


def advance_boss(state: DuelState) -> Outcome:
    _require_in_progress(state)

    state, winner = apply_effects(state)
    if winner is not None:
        return state, winner

    hit_points = deal_damage(state.caster.hit_points, state.boss.damage - state.caster.armor)
    state = state.with_caster(hit_points=hit_points)
    return state, state.winner


def play_round(state: DuelState, move: Move) -> Outcome:
    """Caster casts `move`, then the boss acts unless the duel already ended."""
    state, winner = advance_caster(state, move)
    if winner is not None:
        return state, winner
    return advance_boss(state)
