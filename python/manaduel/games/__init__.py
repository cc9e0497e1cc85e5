"""Built-in game definitions for the search engine."""

from .wizard_duel import WizardDuel, min_mana_to_win

__all__ = ["WizardDuel", "min_mana_to_win"]
