import argparse
import logging

from core.game import GameEngine
from core.models import GameConfig

from .console import ConsoleHost


def main() -> None:
    parser = argparse.ArgumentParser(description="Commune betting card game")
    parser.add_argument("--players", type=int, default=None, help="Start immediately with this many players")
    parser.add_argument("--seed", type=int, default=None, help="Seed the shuffle for a repeatable game")
    parser.add_argument("--max-penalties", type=int, default=3, help="Penalties that knock a player out")
    parser.add_argument("--show-odds", action="store_true", help="Print the most likely bets every turn")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    config = GameConfig(
        players=args.players if args.players is not None else GameConfig.players,
        max_penalties=args.max_penalties,
        seed=args.seed,
    )
    engine = GameEngine(config)
    if args.players is not None:
        engine.new_game()

    ConsoleHost(engine, show_odds=args.show_odds).run()


if __name__ == "__main__":
    main()
