from __future__ import annotations


class CommuneError(Exception):
    """Base class for every condition raised by the Commune engine."""


class NotEnoughCards(CommuneError, ValueError):
    def __init__(self, requested: int, remaining: int) -> None:
        super().__init__(f"Not enough cards left in deck (requested {requested}, {remaining} remaining)")
        self.requested = requested
        self.remaining = remaining


class InvalidArguments(CommuneError, ValueError):
    pass


class InvalidInput(CommuneError, ValueError):
    pass


class GameError(CommuneError, RuntimeError):
    pass


class CallWithNoBet(GameError):
    def __init__(self) -> None:
        super().__init__("Cannot call: no bet has been made this round")


class BetTooLow(GameError):
    pass


class GameOver(GameError):
    pass
