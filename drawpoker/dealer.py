"""Fixed-strategy draw decisions for the dealer.

The policy is a lookup table from hand category to a pure rule that picks slot
indices (0-4) to replace. It never inspects the deck and never randomizes, so
the same hand always yields the same discards.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Dict, List, Optional, Sequence

from .cards import Card
from .evaluator import classify, validate_hand
from .models import DealerConfig, HandCategory, HandEvaluation

LOGGER = logging.getLogger("drawpoker.dealer")

Rule = Callable[[Sequence[Card], HandEvaluation, DealerConfig], List[int]]


def _stand_pat(hand: Sequence[Card], evaluation: HandEvaluation, config: DealerConfig) -> List[int]:
    return []


def _keep_rank_with_count(hand: Sequence[Card], count: int) -> List[int]:
    counts = Counter(card.rank for card in hand)
    keep = {rank for rank, seen in counts.items() if seen == count}
    return [idx for idx, card in enumerate(hand) if card.rank not in keep]


def _three_of_a_kind(hand: Sequence[Card], evaluation: HandEvaluation, config: DealerConfig) -> List[int]:
    return _keep_rank_with_count(hand, 3)


def _two_pair(hand: Sequence[Card], evaluation: HandEvaluation, config: DealerConfig) -> List[int]:
    return _keep_rank_with_count(hand, 2)


def _one_pair(hand: Sequence[Card], evaluation: HandEvaluation, config: DealerConfig) -> List[int]:
    kickers = _keep_rank_with_count(hand, 2)
    # Stable sort keeps slot order among equal values.
    kickers.sort(key=lambda idx: hand[idx].value)
    return sorted(kickers[:2])


def _four_flush(hand: Sequence[Card]) -> List[int]:
    suits = Counter(card.suit for card in hand)
    suit, seen = suits.most_common(1)[0]
    if seen != 4:
        return []
    return [idx for idx, card in enumerate(hand) if card.suit != suit]


def straight_draw(hand: Sequence[Card]) -> List[int]:
    """Slot of the one card outside a four-card run, or [] when there is no draw.

    Windows of five consecutive values are scanned from ace-high down to the
    wheel (ace as 1). The first window holding exactly four distinct hand values
    wins, so open-ended and inside draws are both detected and the higher draw
    is preferred.
    """
    values = [card.value for card in hand]
    for low in range(10, 0, -1):
        window = set(range(low, low + 5))
        if low == 1:
            window.add(14)
        inside = {value for value in values if value in window}
        if len(inside) != 4:
            continue
        outside = [idx for idx, value in enumerate(values) if value not in window]
        if len(outside) == 1:
            return outside
    return []


def _keep_top_two(hand: Sequence[Card]) -> List[int]:
    ordered = sorted(range(len(hand)), key=lambda idx: hand[idx].value, reverse=True)
    return sorted(ordered[2:])


def _high_card(hand: Sequence[Card], evaluation: HandEvaluation, config: DealerConfig) -> List[int]:
    discards = _four_flush(hand)
    if discards:
        LOGGER.debug("Four-flush draw, replacing slot %s", discards)
        return discards
    if config.straight_draws:
        discards = straight_draw(hand)
        if discards:
            LOGGER.debug("Straight draw, replacing slot %s", discards)
            return discards
    return _keep_top_two(hand)


def _made_hand_or_draw(hand: Sequence[Card], evaluation: HandEvaluation, config: DealerConfig) -> List[int]:
    if evaluation.category == HandCategory.FLUSH:
        cutoff = config.flush_stand_high
    else:
        cutoff = config.straight_stand_high
    if evaluation.key[0] >= cutoff:
        return []
    LOGGER.debug("Marginal %s %s below cutoff %d", evaluation.category.value, evaluation.key, cutoff)
    return _high_card(hand, evaluation, config)


POLICY_TABLE: Dict[HandCategory, Rule] = {
    HandCategory.STRAIGHT_FLUSH: _stand_pat,
    HandCategory.FOUR_OF_A_KIND: _stand_pat,
    HandCategory.FULL_HOUSE: _stand_pat,
    HandCategory.FLUSH: _made_hand_or_draw,
    HandCategory.STRAIGHT: _made_hand_or_draw,
    HandCategory.THREE_OF_A_KIND: _three_of_a_kind,
    HandCategory.TWO_PAIR: _two_pair,
    HandCategory.ONE_PAIR: _one_pair,
    HandCategory.HIGH_CARD: _high_card,
}


def choose_discards(cards: Sequence[Card], config: Optional[DealerConfig] = None) -> List[int]:
    """Return the ascending slot indices (at most three) the dealer replaces."""
    hand = validate_hand(cards)
    config = config or DealerConfig()
    evaluation = classify(hand)
    discards = POLICY_TABLE[evaluation.category](hand, evaluation, config)
    LOGGER.debug("Dealer holds %s, discarding %s", evaluation.category.value, discards)
    return discards


choose_dealer_discards = choose_discards
