from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .cards import Card, RANK_ORDER
from .models import HandCategory, HandEvaluation, Verdict

HAND_SIZE = 5
WHEEL_VALUES = (14, 5, 4, 3, 2)
WHEEL_KEY = (5, 4, 3, 2, 1)


def validate_hand(cards: Sequence[Card]) -> Tuple[Card, ...]:
    """Reject anything that is not exactly five distinct cards."""
    hand = tuple(cards)
    if len(hand) != HAND_SIZE:
        raise ValueError(f"Hand must contain exactly {HAND_SIZE} cards, got {len(hand)}")
    for card in hand:
        if not isinstance(card, Card):
            raise ValueError(f"Not a card: {card!r}")
    if len(set(hand)) != HAND_SIZE:
        raise ValueError("Hand contains duplicate cards")
    return hand


def rank_counts(cards: Sequence[Card]) -> List[int]:
    """Multiplicity per rank, indexed by value - 2 (13 slots, deuce first)."""
    counts = [0] * len(RANK_ORDER)
    for card in cards:
        counts[card.value - 2] += 1
    return counts


def is_flush(cards: Sequence[Card]) -> bool:
    return len({card.suit for card in cards}) == 1


def straight_key(cards: Sequence[Card]) -> Optional[Tuple[int, ...]]:
    """Descending key for a five-card straight, or None.

    The wheel A-2-3-4-5 plays the ace as 1. Wrap-arounds such as K-A-2-3-4 are
    not straights.
    """
    values = sorted((card.value for card in cards), reverse=True)
    if len(set(values)) != len(values):
        return None
    if tuple(values) == WHEEL_VALUES:
        return WHEEL_KEY
    if values[0] - values[-1] == len(values) - 1:
        return tuple(values)
    return None


def classify(cards: Sequence[Card]) -> HandEvaluation:
    hand = validate_hand(cards)
    counts = rank_counts(hand)

    # Order ranks by multiplicity then value: quads/trips/pairs lead, kickers follow descending.
    groups = sorted(
        ((count, idx + 2) for idx, count in enumerate(counts) if count),
        reverse=True,
    )
    shape = [count for count, _ in groups]
    grouped_key = tuple(value for _, value in groups)

    flush = is_flush(hand)
    straight = straight_key(hand)

    if straight and flush:
        return HandEvaluation(HandCategory.STRAIGHT_FLUSH, straight)
    if shape[0] == 4:
        return HandEvaluation(HandCategory.FOUR_OF_A_KIND, grouped_key)
    if shape[:2] == [3, 2]:
        return HandEvaluation(HandCategory.FULL_HOUSE, grouped_key)
    if flush:
        return HandEvaluation(HandCategory.FLUSH, grouped_key)
    if straight:
        return HandEvaluation(HandCategory.STRAIGHT, straight)
    if shape[0] == 3:
        return HandEvaluation(HandCategory.THREE_OF_A_KIND, grouped_key)
    if shape[:2] == [2, 2]:
        return HandEvaluation(HandCategory.TWO_PAIR, grouped_key)
    if shape[0] == 2:
        return HandEvaluation(HandCategory.ONE_PAIR, grouped_key)
    return HandEvaluation(HandCategory.HIGH_CARD, grouped_key)


def compare(a: HandEvaluation, b: HandEvaluation) -> int:
    """Three-way comparison: 1 if a wins, -1 if b wins, 0 for an exact tie."""
    if a.strength > b.strength:
        return 1
    if a.strength < b.strength:
        return -1
    return 0


def verdict(player: HandEvaluation, dealer: HandEvaluation) -> Verdict:
    result = compare(player, dealer)
    if result > 0:
        return Verdict.PLAYER_WINS
    if result < 0:
        return Verdict.DEALER_WINS
    return Verdict.TIE


def compare_hands(player: Sequence[Card], dealer: Sequence[Card]) -> Verdict:
    return verdict(classify(player), classify(dealer))


def describe_rank(evaluation: HandEvaluation) -> str:
    return evaluation.category.value.replace("-", "_")
