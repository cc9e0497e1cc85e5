"""Mana duel — least-cost search over a turn-based caster/boss duel."""

from .engine import search, SearchResult
from .game import WeightedGame
from .models import Boss, Caster, Difficulty, DuelState, Effect, EffectTimers, Winner
from .moves import MOVES, Move
from .games.wizard_duel import WizardDuel, min_mana_to_win

__all__ = [
    "search", "SearchResult", "WeightedGame",
    "Boss", "Caster", "Difficulty", "DuelState", "Effect", "EffectTimers", "Winner",
    "MOVES", "Move", "WizardDuel", "min_mana_to_win",
]
