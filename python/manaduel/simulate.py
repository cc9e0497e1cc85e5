"""Replay and random-play simulation through the turn engine.

Replay re-walks a move sequence half-turn by half-turn, which is how a
search result is checked independently of the search. Random play gives a
quick Monte Carlo upper bound on the cheapest win:

1. Validating search results
2. Sanity-checking boss stats that are too large to search exhaustively
3. Seeing how forgiving a duel is to unplanned play
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Iterable, Optional

from manaduel.errors import IllegalMoveError
from manaduel.models import DuelState, Winner
from manaduel.moves import MOVES, Move, get_move
from manaduel.turns import advance_boss, advance_caster


@dataclass(frozen=True)
class ReplayStep:
    round: int
    actor: str  # "caster" or "boss"
    move: Optional[Move]
    state: DuelState
    winner: Optional[Winner]


def replay(initial_state: DuelState, moves: Iterable[Move | str]) -> list[ReplayStep]:
    """Play `moves` one round each and record every half-turn.

    Move names are accepted as well as Move objects. Raises IllegalMoveError
    (GameFinishedError included) as soon as a move cannot be played.
    """
    steps = []
    state = initial_state
    for round_num, move in enumerate(moves, start=1):
        if isinstance(move, str):
            move = get_move(move)
        state, winner = advance_caster(state, move)
        steps.append(ReplayStep(round_num, "caster", move, state, winner))
        if winner is not None:
            continue
        state, winner = advance_boss(state)
        steps.append(ReplayStep(round_num, "boss", None, state, winner))
    return steps


def path_cost(moves: Iterable[Move | str]) -> int:
    return sum((get_move(m) if isinstance(m, str) else m).cost for m in moves)


def simulate_random_duels(
    initial_state: DuelState,
    *,
    num_simulations: int = 1000,
    seed: int | None = None,
    max_rounds: int = 200,
) -> dict:
    """Play duels with uniformly random legal moves.

    A caster with no legal move loses. Returns dict with:
        - wins, losses: duel counts (unfinished duels count as neither)
        - win_rate: wins / num_simulations
        - cheapest_win: least mana spent in any won duel, or None
        - mean_rounds: average rounds played per duel
    """
    rng = random.Random(seed)

    wins = losses = 0
    cheapest_win = None
    total_rounds = 0

    for _ in range(num_simulations):
        state = initial_state
        spent = 0
        winner = None
        rounds = 0

        while winner is None and rounds < max_rounds:
            options = []
            for move in MOVES:
                try:
                    options.append((move, advance_caster(state, move)))
                except IllegalMoveError:
                    continue
            rounds += 1
            if not options:
                winner = Winner.BOSS
                break

            move, (state, winner) = rng.choice(options)
            spent += move.cost
            if winner is None:
                state, winner = advance_boss(state)

        total_rounds += rounds
        if winner is Winner.CASTER:
            wins += 1
            if cheapest_win is None or spent < cheapest_win:
                cheapest_win = spent
        elif winner is Winner.BOSS:
            losses += 1

    return {
        "wins": wins,
        "losses": losses,
        "win_rate": wins / num_simulations if num_simulations else 0.0,
        "cheapest_win": cheapest_win,
        "mean_rounds": total_rounds / num_simulations if num_simulations else 0.0,
    }
