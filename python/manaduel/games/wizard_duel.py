"""WizardDuel — caster versus boss, minimising mana spent.

The caster chooses one of five moves each round and pays its mana cost;
the boss always attacks. Some moves start effects that tick at the start
of every following half-turn (both the caster's and the boss's).

State: DuelState(caster, boss, timers, difficulty).
Edge: "cast move X, then let the boss act", weighted by X's cost. Edges
that end with the caster dead are dropped; edges where the caster's own
half-turn already kills the boss stop there.

On Hard difficulty the caster loses 1 hit point at the start of each of
their half-turns.
"""

from __future__ import annotations

from manaduel.engine import search, SearchResult
from manaduel.errors import IllegalMoveError
from manaduel.game import cheapest_transitions
from manaduel.models import Boss, Caster, Difficulty, DuelState, Winner
from manaduel.moves import MOVES
from manaduel.turns import advance_boss, advance_caster


class WizardDuel:
    """Caster-versus-boss duel as a weighted game for the search engine."""

    class Config:
        def __init__(
            self,
            caster_hit_points=50,
            caster_mana=500,
            difficulty=Difficulty.NORMAL,
        ):
            self.caster_hit_points = caster_hit_points
            self.caster_mana = caster_mana
            self.difficulty = difficulty

        def __repr__(self):
            return (
                f"WizardDuel.Config(caster_hit_points={self.caster_hit_points}, "
                f"caster_mana={self.caster_mana}, difficulty={self.difficulty.name})"
            )

    PRESETS = {
        "normal": Difficulty.NORMAL,
        "hard": Difficulty.HARD,
    }

    @staticmethod
    def preset(name, **overrides):
        """A fresh Config for the named preset; keyword overrides replace vitals."""
        return WizardDuel.Config(difficulty=WizardDuel.PRESETS[name], **overrides)

    @staticmethod
    def initial_state(boss, config=None):
        if config is None:
            config = WizardDuel.Config()
        caster = Caster(hit_points=config.caster_hit_points, mana=config.caster_mana)
        return DuelState(caster=caster, boss=boss, difficulty=config.difficulty)

    @staticmethod
    def is_terminal(state):
        return state.winner is not None

    @staticmethod
    def is_goal(state):
        return state.winner is Winner.CASTER

    @staticmethod
    def is_dead_end(state):
        return state.winner is Winner.BOSS

    @staticmethod
    def get_transitions(state, config=None):
        """One (cost, move, next_state) edge per legal, non-losing move."""
        if state.winner is not None:
            return []

        transitions = []
        for move in MOVES:
            try:
                next_state, winner = advance_caster(state, move)
                if winner is None:
                    next_state, winner = advance_boss(next_state)
            except IllegalMoveError:
                continue
            if winner is Winner.BOSS:
                continue
            transitions.append((move.cost, move, next_state))

        return cheapest_transitions(transitions)

    @staticmethod
    def solve(boss, config=None, **search_kwargs) -> SearchResult:
        """Run the search from the initial state for `boss` under `config`.

        Extra keyword arguments (max_cost, should_stop) go to search().
        """
        if config is None:
            config = WizardDuel.Config()
        return search(
            initial_state=WizardDuel.initial_state(boss, config),
            is_goal=WizardDuel.is_goal,
            is_dead_end=WizardDuel.is_dead_end,
            get_transitions=WizardDuel.get_transitions,
            config=config,
            **search_kwargs,
        )

    @staticmethod
    def tostr(state):
        timers = ",".join(str(t) for t in state.timers.remaining)
        return (
            f"C[hp={state.caster.hit_points} ar={state.caster.armor} mp={state.caster.mana}] "
            f"B[hp={state.boss.hit_points}] T[{timers}] {state.difficulty.name}"
        )


def min_mana_to_win(boss: Boss, difficulty: Difficulty = Difficulty.NORMAL) -> int | None:
    """Least total mana that wins against `boss`, or None if no win exists."""
    config = WizardDuel.preset(difficulty.name.lower())
    return WizardDuel.solve(boss, config).cost
