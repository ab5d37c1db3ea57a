from __future__ import annotations

import dataclasses
import logging
import random
from typing import List, Optional, Tuple

from .deck import Deck, Hand
from .errors import BetTooLow, CallWithNoBet, GameOver, NotEnoughCards
from .evaluator import Commune, contains
from .hand_value import HandValue, describe
from .models import Bet, Call, GameConfig, GameMove, NewGame, Player, RoundResult
from .probability import best_bets

LOGGER = logging.getLogger("commune.game")

# GameEngine keeps all table state in memory. No terminal I/O lives here, only
# turn order, bets, calls, and penalty accounting.


class GameEngine:
    """Turn-based Commune table.

    Each round every active player is dealt ``penalties + 1`` cards from a
    fresh deck. Players take turns raising the bet until someone calls; the
    pooled hands of every active player then decide who was wrong. A wrong
    bettor, or a caller who doubted a true bet, takes a penalty and leads the
    next round. Reaching ``max_penalties`` knocks a player out.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.players: List[Player] = []
        self.current_turn = 0
        self.current_bet: Optional[HandValue] = None
        self.bettor: Optional[int] = None
        self.deck: Optional[Deck] = None
        self.round_counter = 0
        self.finished = False
        self.winner: Optional[int] = None
        self.history: List[RoundResult] = []

    # Move dispatch ---------------------------------------------------

    def process_move(self, move: GameMove) -> Optional[RoundResult]:
        if isinstance(move, NewGame):
            self.new_game(move.players)
            return None
        if isinstance(move, Bet):
            self.bet(move.value)
            return None
        if isinstance(move, Call):
            return self.call()
        raise ValueError(f"Unsupported move: {move!r}")

    # Game lifecycle --------------------------------------------------

    def new_game(self, players: Optional[int] = None) -> None:
        if players is not None:
            self.config = dataclasses.replace(self.config, players=players)
        self.players = [
            Player(name=idx, hand=Hand.empty(), penalties=0, max_penalties=self.config.max_penalties)
            for idx in range(self.config.players)
        ]
        self.round_counter = 0
        self.finished = False
        self.winner = None
        self.history.clear()
        LOGGER.info("New game with %d players", len(self.players))
        self._start_round(leader=0)

    def _start_round(self, leader: int) -> None:
        self.current_bet = None
        self.bettor = None
        self.round_counter += 1
        self.deck = Deck.standard(rng=self.rng)
        try:
            for player in self.players:
                player.hand = self.deck.deal(0 if player.is_out else player.cards_due)
        except NotEnoughCards as exc:
            # A short deck ends the game; there is no reshuffle of dealt cards.
            LOGGER.warning("Round %d cannot be dealt: %s", self.round_counter, exc)
            self.finished = True
            return
        self.current_turn = leader if not self.players[leader].is_out else self._next_active(leader)
        LOGGER.debug(
            "Round %d dealt, %d cards in play, player %d leads",
            self.round_counter,
            self.cards_in_play(),
            self.current_turn,
        )

    def _ensure_running(self) -> None:
        if not self.players:
            raise GameOver("No game in progress")
        if self.finished:
            raise GameOver("The game is over")

    # Moves -----------------------------------------------------------

    def bet(self, value: HandValue) -> None:
        self._ensure_running()
        if self.current_bet is not None and value <= self.current_bet:
            raise BetTooLow(f"Bet must beat {describe(self.current_bet)}")
        self.current_bet = value
        self.bettor = self.current_turn
        LOGGER.debug("Player %d bets %s", self.current_turn, describe(value))
        self.current_turn = self._next_active(self.current_turn)

    def call(self) -> RoundResult:
        self._ensure_running()
        if self.current_bet is None or self.bettor is None:
            raise CallWithNoBet()

        bet, bettor, caller = self.current_bet, self.bettor, self.current_turn
        commune = self.commune()
        bet_held = contains(commune, bet)
        penalized = caller if bet_held else bettor
        loser = self.players[penalized]
        loser.penalties += 1
        LOGGER.info(
            "Player %d calls %s from player %d: %s; player %d takes penalty %d",
            caller,
            describe(bet),
            bettor,
            "it holds" if bet_held else "it does not hold",
            penalized,
            loser.penalties,
        )

        active = self.active_players()
        if len(active) <= 1:
            self.finished = True
            self.winner = active[0].name if active else None
            LOGGER.info("Game over, winner: player %s", self.winner)
        else:
            self._start_round(leader=penalized)

        result = RoundResult(
            bet=bet,
            bettor=bettor,
            caller=caller,
            bet_held=bet_held,
            penalized=penalized,
            commune=commune.cards,
            eliminated=loser.is_out,
            game_over=self.finished,
            winner=self.winner,
        )
        self.history.append(result)
        return result

    # Queries ---------------------------------------------------------

    def active_players(self) -> List[Player]:
        return [player for player in self.players if not player.is_out]

    def current_player(self) -> Player:
        self._ensure_running()
        return self.players[self.current_turn]

    def commune(self) -> Commune:
        return Commune.from_hands(*(player.hand for player in self.active_players()))

    def cards_in_play(self) -> int:
        return sum(len(player.hand) for player in self.active_players())

    def odds(self, limit: int = 5) -> List[Tuple[HandValue, float]]:
        """Most likely bets for the player to act, given how many cards the others hold."""
        player = self.current_player()
        others = self.cards_in_play() - len(player.hand)
        return best_bets(player.hand, others, limit)

    def _next_active(self, start: int) -> int:
        count = len(self.players)
        for offset in range(1, count + 1):
            idx = (start + offset) % count
            if not self.players[idx].is_out:
                return idx
        raise GameOver("No active players left")
