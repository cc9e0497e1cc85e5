"""Exception types shared across the duel modules."""


class IllegalMoveError(Exception):
    """A half-turn that is not a legal continuation of the duel.

    The search treats these as missing edges, not as failures.
    """


class GameFinishedError(IllegalMoveError):
    def __init__(self, winner):
        super().__init__(f"duel is already finished ({winner.name.lower()} won)")
        self.winner = winner


class InsufficientManaError(IllegalMoveError):
    def __init__(self, move, mana):
        super().__init__(f"{move.name} costs {move.cost} mana, caster has {mana}")
        self.move = move
        self.mana = mana


class EffectAlreadyActiveError(IllegalMoveError):
    def __init__(self, move, remaining):
        super().__init__(
            f"{move.name} would re-activate {move.effect.name.lower()} "
            f"with {remaining} ticks remaining"
        )
        self.move = move
        self.remaining = remaining


class UnknownMoveError(KeyError):
    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"unknown move: {self.name!r}"


class BossStatsError(ValueError):
    """Boss stats text is malformed or incomplete."""


class SearchCancelled(RuntimeError):
    def __init__(self, expanded):
        super().__init__(f"search cancelled after expanding {expanded} states")
        self.expanded = expanded
