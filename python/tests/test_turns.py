"""Tests for the turn engine: half-turn ordering, legality, effect ticks.

Scenario A and B walk the example duels half-turn by half-turn and check
every intermediate value.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
from manaduel.errors import (
    EffectAlreadyActiveError, GameFinishedError, IllegalMoveError, InsufficientManaError,
)
from manaduel.models import Boss, Caster, Difficulty, DuelState, Effect, Winner
from manaduel.moves import DRAIN, GUARD, MOVES, POISON, RECHARGE, STRIKE
from manaduel.turns import advance_boss, advance_caster, apply_effects, check_castable, play_round


def duel(caster_hp=10, mana=250, boss_hp=13, boss_damage=8, difficulty=Difficulty.NORMAL):
    return DuelState(Caster(caster_hp, 0, mana), Boss(boss_hp, boss_damage), difficulty=difficulty)


class TestScenarioA:
    """Caster 10 HP / 250 mana vs boss 13 HP / 8 damage: Poison, then Strike."""

    def test_trace(self):
        state = duel(boss_hp=13)
        assert str(state.caster) == "Caster has 10 hit points, 0 armor, 250 mana"
        assert str(state.boss) == "Boss has 13 hit points"

        state, winner = advance_caster(state, POISON)
        assert winner is None
        assert str(state.caster) == "Caster has 10 hit points, 0 armor, 77 mana"
        assert state.boss.hit_points == 13
        assert state.timers[Effect.POISON] == 6

        state, winner = advance_boss(state)
        assert winner is None
        assert str(state.caster) == "Caster has 2 hit points, 0 armor, 77 mana"
        assert state.boss.hit_points == 10
        assert state.timers[Effect.POISON] == 5

        state, winner = advance_caster(state, STRIKE)
        assert winner is None
        assert str(state.caster) == "Caster has 2 hit points, 0 armor, 24 mana"
        assert state.boss.hit_points == 3

        state, winner = advance_boss(state)
        assert winner is Winner.CASTER
        assert state.boss.hit_points == 0
        # the boss died to poison before attacking
        assert state.caster.hit_points == 2


class TestScenarioB:
    """Caster 10 HP / 250 mana vs boss 14 HP / 8 damage:
    Recharge, Guard, Drain, Poison, Strike."""

    def test_trace(self):
        state = duel(boss_hp=14)

        state, winner = advance_caster(state, RECHARGE)
        assert winner is None
        assert str(state.caster) == "Caster has 10 hit points, 0 armor, 21 mana"
        assert state.boss.hit_points == 14

        state, winner = advance_boss(state)
        assert winner is None
        assert state.timers[Effect.RECHARGE] == 4
        assert str(state.caster) == "Caster has 2 hit points, 0 armor, 122 mana"
        assert state.boss.hit_points == 14

        state, winner = advance_caster(state, GUARD)
        assert winner is None
        assert state.timers[Effect.RECHARGE] == 3
        assert str(state.caster) == "Caster has 2 hit points, 7 armor, 110 mana"

        state, winner = advance_boss(state)
        assert winner is None
        assert state.timers[Effect.SHIELD] == 5
        assert state.timers[Effect.RECHARGE] == 2
        assert str(state.caster) == "Caster has 1 hit point, 7 armor, 211 mana"

        state, winner = advance_caster(state, DRAIN)
        assert winner is None
        assert state.timers[Effect.SHIELD] == 4
        assert state.timers[Effect.RECHARGE] == 1
        assert str(state.caster) == "Caster has 3 hit points, 7 armor, 239 mana"
        assert state.boss.hit_points == 12

        state, winner = advance_boss(state)
        assert winner is None
        assert state.timers[Effect.SHIELD] == 3
        assert state.timers[Effect.RECHARGE] == 0
        assert str(state.caster) == "Caster has 2 hit points, 7 armor, 340 mana"
        assert state.boss.hit_points == 12

        state, winner = advance_caster(state, POISON)
        assert winner is None
        assert state.timers[Effect.SHIELD] == 2
        assert str(state.caster) == "Caster has 2 hit points, 7 armor, 167 mana"
        assert state.boss.hit_points == 12

        state, winner = advance_boss(state)
        assert winner is None
        assert state.timers[Effect.POISON] == 5
        assert state.timers[Effect.SHIELD] == 1
        assert str(state.caster) == "Caster has 1 hit point, 7 armor, 167 mana"
        assert state.boss.hit_points == 9

        state, winner = advance_caster(state, STRIKE)
        assert winner is None
        assert state.timers[Effect.POISON] == 4
        assert state.timers[Effect.SHIELD] == 0
        assert str(state.caster) == "Caster has 1 hit point, 0 armor, 114 mana"
        assert state.boss.hit_points == 2

        state, winner = advance_boss(state)
        assert winner is Winner.CASTER


class TestLegality:

    def test_insufficient_mana(self):
        state = duel(mana=52)
        with pytest.raises(InsufficientManaError):
            advance_caster(state, STRIKE)

    def test_exact_mana_allowed(self):
        state, winner = advance_caster(duel(mana=53), STRIKE)
        assert state.caster.mana == 0

    def test_effect_active_rejected(self):
        state = duel(mana=500).with_timer(Effect.POISON, 2)
        with pytest.raises(EffectAlreadyActiveError):
            advance_caster(state, POISON)

    def test_effect_with_one_tick_left_allowed(self):
        state = duel(mana=500).with_timer(Effect.POISON, 1)
        state, winner = advance_caster(state, POISON)
        assert winner is None
        assert state.timers[Effect.POISON] == 6
        # the last tick of the old poison still landed
        assert state.boss.hit_points == 10

    def test_shield_recast_at_one_keeps_single_bonus(self):
        state = GUARD.cast(duel(mana=500)).with_timer(Effect.SHIELD, 1)
        assert state.caster.armor == 7
        state, _ = advance_caster(state, GUARD)
        assert state.caster.armor == 7
        assert state.timers[Effect.SHIELD] == 6

    def test_other_effects_do_not_block(self):
        state = duel(mana=500).with_timer(Effect.POISON, 6)
        check_castable(state, RECHARGE)
        check_castable(state, STRIKE)

    def test_rejection_leaves_state_untouched(self):
        state = duel(mana=10)
        before = state
        with pytest.raises(IllegalMoveError):
            advance_caster(state, STRIKE)
        assert state == before

    def test_finished_duel_rejects_both_sides(self):
        won = duel().with_boss(hit_points=0)
        lost = duel().with_caster(hit_points=0)
        for state in (won, lost):
            with pytest.raises(GameFinishedError):
                advance_caster(state, STRIKE)
            with pytest.raises(GameFinishedError):
                advance_boss(state)


class TestHardMode:

    def test_pre_damage_each_caster_turn(self):
        state = duel(difficulty=Difficulty.HARD)
        state, _ = advance_caster(state, STRIKE)
        assert state.caster.hit_points == 9

    def test_boss_turn_has_no_pre_damage(self):
        state = GUARD.cast(duel(mana=500, difficulty=Difficulty.HARD))
        state, _ = advance_boss(state)
        assert state.caster.hit_points == 9  # 8 - 7 armor = 1

    def test_pre_damage_kill_skips_legality(self):
        """Dying to the Hard-mode damage is reported before mana is checked."""
        state = duel(caster_hp=1, mana=0, difficulty=Difficulty.HARD)
        state, winner = advance_caster(state, RECHARGE)
        assert winner is Winner.BOSS
        assert state.caster.hit_points == 0
        assert state.caster.mana == 0


class TestEffects:

    @pytest.mark.parametrize("ticks", range(0, 9))
    def test_timer_counts_down(self, ticks):
        state = DuelState(Caster(1000, 0, 1000), Boss(1000, 0))
        state = POISON.cast(state)
        for _ in range(ticks):
            state, _ = apply_effects(state)
        assert state.timers[Effect.POISON] == max(6 - ticks, 0)
        assert state.boss.hit_points == 1000 - 3 * min(ticks, 6)

    @pytest.mark.parametrize("ticks", range(0, 9))
    def test_shield_armor_tracks_timer(self, ticks):
        state = GUARD.cast(DuelState(Caster(1000, 0, 1000), Boss(1000, 0)))
        for _ in range(ticks):
            state, _ = apply_effects(state)
        active = state.timers[Effect.SHIELD] > 0
        assert state.caster.armor == (7 if active else 0)

    def test_recharge_adds_mana_per_tick(self):
        state = RECHARGE.cast(DuelState(Caster(1000, 0, 229), Boss(1000, 0)))
        for _ in range(5):
            state, _ = apply_effects(state)
        assert state.caster.mana == 505
        assert not state.timers.is_active(Effect.RECHARGE)

    def test_tick_order_stops_at_death(self):
        """Poison kills the boss; the recharge tick after it does not run."""
        state = DuelState(Caster(10, 0, 0), Boss(3, 8))
        state = state.with_timer(Effect.POISON, 4).with_timer(Effect.RECHARGE, 3)
        state, winner = apply_effects(state)
        assert winner is Winner.CASTER
        assert state.timers[Effect.RECHARGE] == 3
        assert state.caster.mana == 0

    def test_boss_attack_minimum_one(self):
        state = GUARD.cast(DuelState(Caster(10, 0, 500), Boss(20, 3)))
        state, _ = advance_boss(state)
        assert state.caster.hit_points == 9


class TestPlayRound:

    def test_round_includes_boss_attack(self):
        state, winner = play_round(duel(), STRIKE)
        assert winner is None
        assert state.caster.hit_points == 2
        assert state.boss.hit_points == 9

    def test_round_stops_when_caster_kills(self):
        state, winner = play_round(duel(boss_hp=4), STRIKE)
        assert winner is Winner.CASTER
        assert state.caster.hit_points == 10

    def test_every_move_is_pure(self):
        start = duel(mana=500)
        for move in MOVES:
            play_round(start, move)
        assert start == duel(mana=500)
