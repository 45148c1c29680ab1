from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

RANKS = "AKQJT98765432"
SUITS = "hdcs"
RANK_ORDER = "23456789TJQKA"
RANK_VALUE = {rank: idx for idx, rank in enumerate(RANK_ORDER, start=2)}
SUIT_NAMES = {"h": "hearts", "d": "diamonds", "c": "clubs", "s": "spades"}
SUIT_SYMBOLS = {"h": "♥", "d": "♦", "c": "♣", "s": "♠"}
DECK_SIZE = len(RANKS) * len(SUITS)

_SYMBOL_TO_SUIT = {symbol: suit for suit, symbol in SUIT_SYMBOLS.items()}


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"

    @property
    def value(self) -> int:
        """Ace-high numeric value, 2..14."""
        return RANK_VALUE[self.rank]

    @property
    def suit_name(self) -> str:
        return SUIT_NAMES[self.suit]

    def __str__(self) -> str:
        return self.label


def canonical_cards() -> List[Card]:
    return [Card(rank, suit) for suit in SUITS for rank in RANKS[::-1]]


def shuffle_cards(cards: List[Card], rng: random.Random) -> None:
    """Unbiased in-place Fisher-Yates: walk down from the last index, swap with any index <= i."""
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]


class Deck:
    """Ordered 52-card deck; cards are dealt from the front."""

    def __init__(self, cards: Sequence[Card]) -> None:
        cards = list(cards)
        if len(cards) != DECK_SIZE:
            raise ValueError(f"Deck must hold {DECK_SIZE} cards, got {len(cards)}")
        if set(cards) != set(canonical_cards()):
            raise ValueError("Deck must contain every card exactly once")
        self._cards = cards

    @classmethod
    def new_shuffled(cls, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> "Deck":
        if rng is None:
            rng = random.Random(seed)
        cards = canonical_cards()
        shuffle_cards(cards, rng)
        return cls(cards)

    @property
    def remaining(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def peek(self, count: int = 1) -> List[Card]:
        return list(self._cards[:count])

    def draw_one(self) -> Card:
        if not self._cards:
            raise ValueError("Not enough cards left in deck")
        return self._cards.pop(0)

    def draw(self, count: int) -> List[Card]:
        if count < 0:
            raise ValueError("Cannot draw a negative number of cards")
        if len(self._cards) < count:
            raise ValueError("Not enough cards left in deck")
        cards = self._cards[:count]
        del self._cards[:count]
        return cards

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"


def new_shuffled_deck(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Deck:
    return Deck.new_shuffled(seed=seed, rng=rng)


def parse_label(label: str) -> Card:
    """Parse 'Ah', 'Th', '10h' or '10♥' into a Card."""
    label = label.strip()
    if len(label) < 2:
        raise ValueError(f"Invalid card label: {label}")
    rank, suit = label[:-1], label[-1]
    if rank == "10":
        rank = "T"
    suit = _SYMBOL_TO_SUIT.get(suit, suit)
    if len(rank) != 1:
        raise ValueError(f"Invalid card label: {label}")
    return Card(rank.upper(), suit.lower())


def parse_cards(labels: Iterable[str]) -> List[Card]:
    return [parse_label(label) for label in labels]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def render_card(card: Card) -> str:
    rank = "10" if card.rank == "T" else card.rank
    return rank + SUIT_SYMBOLS[card.suit]


def render_cards(cards: Sequence[Card]) -> str:
    if not cards:
        return "--"
    return " ".join(render_card(card) for card in cards)
