from __future__ import annotations

import logging
from typing import Callable, Optional

from core.errors import CommuneError, InvalidInput
from core.game import GameEngine
from core.hand_value import describe
from core.models import RoundResult
from core.parser import format_hand_value, parse_hand_value
from core.render import render_cards

LOGGER = logging.getLogger("commune.host")

MOVES_PROMPT = "What is your next move? (new, bet, call, odds, quit)"

# ConsoleHost is the line-based front end: it reads commands, forwards them to
# the GameEngine, and prints whatever the engine reports back.


class ConsoleHost:
    def __init__(
        self,
        engine: GameEngine,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        show_odds: bool = False,
    ) -> None:
        self.engine = engine
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.show_odds = show_odds

    def run(self) -> None:
        self.output_fn("Welcome to Commune!")
        while not self.engine.players:
            if not self.handle("new"):
                return
        while not self.engine.finished:
            self._display()
            line = self._read(f"Player {self.engine.current_turn} - {MOVES_PROMPT}")
            if line is None or not self.handle(line):
                break
        if self.engine.finished:
            self._announce_game_over()

    def handle(self, line: str) -> bool:
        """Run one command. Returns False when the loop should stop."""
        command = line.strip().lower()
        try:
            if command == "new":
                return self._new_game()
            if command == "bet":
                return self._bet()
            if command == "call":
                self._report(self.engine.call())
                return True
            if command == "odds":
                self._print_odds()
                return True
            if command in ("quit", "exit"):
                return False
        except CommuneError as exc:
            LOGGER.debug("Rejected %r: %s", command, exc)
            self.output_fn(f"Error: {exc}")
            return True
        self.output_fn("Invalid input!")
        return True

    # Commands --------------------------------------------------------

    def _new_game(self) -> bool:
        line = self._read("How many players?")
        if line is None:
            return False
        try:
            players = int(line.strip())
        except ValueError:
            raise InvalidInput(f"Not a player count: {line.strip()!r}") from None
        try:
            self.engine.new_game(players)
        except ValueError as exc:
            raise InvalidInput(str(exc)) from None
        return True

    def _bet(self) -> bool:
        line = self._read("Enter your bet (e.g. quad A):")
        if line is None:
            return False
        self.engine.bet(parse_hand_value(line))
        return True

    # Output ----------------------------------------------------------

    def _display(self) -> None:
        player = self.engine.current_player()
        standings = ", ".join(
            f"P{p.name}: {'out' if p.is_out else f'{p.penalties} penalties, {len(p.hand)} cards'}"
            for p in self.engine.players
        )
        self.output_fn(standings)
        self.output_fn(f"Player {player.name}'s hand:")
        self.output_fn(render_cards(player.hand.cards))
        bet = self.engine.current_bet
        self.output_fn(f"Current Bet: {describe(bet) if bet is not None else 'none'}")
        if self.show_odds:
            self._print_odds()

    def _print_odds(self) -> None:
        self.output_fn("Most likely bets:")
        for value, probability in self.engine.odds():
            self.output_fn(f"  {format_hand_value(value):<16} {probability:6.1%}")

    def _report(self, result: RoundResult) -> None:
        self.output_fn("Commune:")
        self.output_fn(render_cards(list(result.commune)))
        verdict = "holds" if result.bet_held else "does not hold"
        self.output_fn(f"Player {result.bettor}'s bet of {describe(result.bet)} {verdict}.")
        self.output_fn(f"Player {result.penalized} takes a penalty.")
        if result.eliminated:
            self.output_fn(f"Player {result.penalized} is out!")

    def _announce_game_over(self) -> None:
        if self.engine.winner is not None:
            self.output_fn(f"Game over! Player {self.engine.winner} wins.")
        else:
            self.output_fn("Game over! The deck ran out of cards.")

    def _read(self, prompt: str) -> Optional[str]:
        self.output_fn(prompt)
        try:
            return self.input_fn("> ")
        except EOFError:
            return None
