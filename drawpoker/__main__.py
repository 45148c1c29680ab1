import argparse
import logging
from typing import List, Optional

from .cards import render_cards
from .dealer import choose_discards
from .game import GameEngine
from .models import DealerConfig, GameConfig, Phase

LOGGER = logging.getLogger("drawpoker")


def parse_slots(raw: str, limit: int) -> Optional[List[int]]:
    """Turn '1 3 5' (1-based positions) into [0, 2, 4]; None means re-prompt."""
    tokens = raw.replace(",", " ").split()
    try:
        positions = [int(token) for token in tokens]
    except ValueError:
        print("Enter card positions as numbers, e.g. 1 4 5")
        return None
    if any(pos < 1 or pos > 5 for pos in positions):
        print("Positions must be between 1 and 5")
        return None
    if len(set(positions)) != len(positions):
        print("Each position may be picked once")
        return None
    if len(positions) > limit:
        print(f"You may replace at most {limit} cards")
        return None
    return [pos - 1 for pos in positions]


def prompt_slots(engine: GameEngine) -> List[int]:
    ctx = engine.round
    assert ctx is not None
    print(f"\nYour hand:   {render_cards(ctx.player_hand)}")
    print("             " + "   ".join(str(pos) for pos in range(1, 6)))
    while True:
        raw = input(f"Replace which cards? (max {engine.config.max_replacements}, blank to stand): ")
        slots = parse_slots(raw, engine.config.max_replacements)
        if slots is not None:
            return slots


def play(engine: GameEngine, rounds: int, seed: Optional[int], interactive: bool, strategy: str) -> None:
    for idx in range(rounds):
        round_seed = None if seed is None else seed + idx
        ctx = engine.start_round(seed=round_seed)
        if interactive:
            slots = prompt_slots(engine)
        elif strategy == "dealer":
            slots = choose_discards(ctx.player_hand, engine.config.dealer)[: engine.config.max_replacements]
        else:
            slots = []
        engine.replace_player(slots)
        engine.replace_dealer()
        result = engine.showdown()
        assert ctx.phase == Phase.COMPARED and ctx.player_eval and ctx.dealer_eval

        if interactive:
            print(f"Your hand:   {render_cards(ctx.player_hand)}  ({ctx.player_eval.category.value})")
            print(
                f"Dealer hand: {render_cards(ctx.dealer_hand)}  ({ctx.dealer_eval.category.value}, "
                f"replaced {len(ctx.dealer_discards)})"
            )
            print(f"Result: {result.value}")
        else:
            LOGGER.debug(
                "%s | player %s [%s] | dealer %s [%s] | %s",
                ctx.round_id,
                render_cards(ctx.player_hand),
                ctx.player_eval.category.value,
                render_cards(ctx.dealer_hand),
                ctx.dealer_eval.category.value,
                result.value,
            )

    stats = engine.stats
    LOGGER.info(
        "Played %d rounds: player %d, dealer %d, ties %d",
        stats.total_games,
        stats.player_wins,
        stats.dealer_wins,
        stats.ties,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Five-card draw against a rule-based dealer")
    parser.add_argument("--rounds", type=int, default=1)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the first round; later rounds use seed+N")
    parser.add_argument("--interactive", action="store_true", help="Prompt for the cards to replace")
    parser.add_argument(
        "--player-strategy",
        choices=("stand", "dealer"),
        default="dealer",
        help="Non-interactive player: stand pat or mirror the dealer policy",
    )
    parser.add_argument("--max-replacements", type=int, default=3)
    parser.add_argument("--flush-stand-high", type=int, default=10, help="Lowest top card a dealer flush keeps")
    parser.add_argument("--straight-stand-high", type=int, default=8, help="Lowest top card a dealer straight keeps")
    parser.add_argument("--no-straight-draws", action="store_true", help="Dealer skips four-card straight draws")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    config = GameConfig(
        max_replacements=args.max_replacements,
        dealer=DealerConfig(
            flush_stand_high=args.flush_stand_high,
            straight_stand_high=args.straight_stand_high,
            straight_draws=not args.no_straight_draws,
        ),
    )
    try:
        play(GameEngine(config), args.rounds, args.seed, args.interactive, args.player_strategy)
    except (KeyboardInterrupt, EOFError):
        print("\nBye")


if __name__ == "__main__":
    main()
