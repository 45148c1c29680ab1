"""Five-card draw adjudication engine: deck, hand evaluation and dealer draw policy."""

from .cards import Card, Deck, RANKS, SUITS, new_shuffled_deck, parse_cards, parse_label
from .dealer import choose_dealer_discards, choose_discards
from .evaluator import classify, compare, compare_hands, verdict
from .game import GameEngine, RoundContext, apply_replacements, deal
from .models import DealerConfig, GameConfig, GameStats, HandCategory, HandEvaluation, Phase, Verdict

__all__ = [
    "Card",
    "Deck",
    "RANKS",
    "SUITS",
    "new_shuffled_deck",
    "parse_cards",
    "parse_label",
    "choose_dealer_discards",
    "choose_discards",
    "classify",
    "compare",
    "compare_hands",
    "verdict",
    "GameEngine",
    "RoundContext",
    "apply_replacements",
    "deal",
    "DealerConfig",
    "GameConfig",
    "GameStats",
    "HandCategory",
    "HandEvaluation",
    "Phase",
    "Verdict",
]
