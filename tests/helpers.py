from __future__ import annotations

from typing import List, Sequence

from drawpoker.cards import Card, Deck, canonical_cards, parse_cards
from drawpoker.game import GameEngine
from drawpoker.models import DealerConfig, GameConfig


def hand(labels: str) -> List[Card]:
    """Build cards from a space-separated label string such as 'As 10d 3c'."""
    return parse_cards(labels.split())


def stacked_deck(front: str) -> Deck:
    """A full deck whose top cards are exactly `front`, in order."""
    top = hand(front)
    rest = [card for card in canonical_cards() if card not in top]
    return Deck(top + rest)


def create_engine(
    *,
    max_replacements: int = 3,
    flush_stand_high: int = 10,
    straight_stand_high: int = 8,
    straight_draws: bool = True,
) -> GameEngine:
    """Instantiate an engine with an explicit dealer configuration."""
    return GameEngine(
        GameConfig(
            max_replacements=max_replacements,
            dealer=DealerConfig(
                flush_stand_high=flush_stand_high,
                straight_stand_high=straight_stand_high,
                straight_draws=straight_draws,
            ),
        )
    )


def event_names(events: Sequence[dict]) -> List[str]:
    return [str(event["ev"]) for event in events]
