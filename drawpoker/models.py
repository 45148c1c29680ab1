from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, Tuple


class HandCategory(str, Enum):
    STRAIGHT_FLUSH = "straight-flush"
    FOUR_OF_A_KIND = "four-of-a-kind"
    FULL_HOUSE = "full-house"
    FLUSH = "flush"
    STRAIGHT = "straight"
    THREE_OF_A_KIND = "three-of-a-kind"
    TWO_PAIR = "two-pair"
    ONE_PAIR = "one-pair"
    HIGH_CARD = "high-card"

    @property
    def weight(self) -> int:
        return CATEGORY_WEIGHTS[self]


CATEGORY_WEIGHTS: Dict[HandCategory, int] = {
    HandCategory.STRAIGHT_FLUSH: 9,
    HandCategory.FOUR_OF_A_KIND: 8,
    HandCategory.FULL_HOUSE: 7,
    HandCategory.FLUSH: 6,
    HandCategory.STRAIGHT: 5,
    HandCategory.THREE_OF_A_KIND: 4,
    HandCategory.TWO_PAIR: 3,
    HandCategory.ONE_PAIR: 2,
    HandCategory.HIGH_CARD: 1,
}


class Verdict(str, Enum):
    PLAYER_WINS = "PLAYER_WINS"
    DEALER_WINS = "DEALER_WINS"
    TIE = "TIE"


class Phase(str, Enum):
    DEALT = "DEALT"
    PLAYER_REPLACING = "PLAYER_REPLACING"
    DEALER_REPLACING = "DEALER_REPLACING"
    EVALUATED = "EVALUATED"
    COMPARED = "COMPARED"


@dataclass(frozen=True)
class HandEvaluation:
    category: HandCategory
    key: Tuple[int, ...]

    @property
    def weight(self) -> int:
        return self.category.weight

    @property
    def strength(self) -> Tuple[int, Tuple[int, ...]]:
        # Category first, then the tie-break key left to right.
        return (self.weight, self.key)

    def as_dict(self) -> Dict[str, object]:
        return {"category": self.category.value, "weight": self.weight, "key": list(self.key)}


@dataclass
class DealerConfig:
    # A flush/straight stands pat when its top card value reaches these cutoffs.
    flush_stand_high: int = 10
    straight_stand_high: int = 8
    straight_draws: bool = True


@dataclass
class GameConfig:
    max_replacements: int = 3
    dealer: DealerConfig = field(default_factory=DealerConfig)


@dataclass
class GameStats:
    total_games: int = 0
    player_wins: int = 0
    dealer_wins: int = 0
    ties: int = 0

    def record(self, verdict: Verdict) -> None:
        self.total_games += 1
        if verdict == Verdict.PLAYER_WINS:
            self.player_wins += 1
        elif verdict == Verdict.DEALER_WINS:
            self.dealer_wins += 1
        else:
            self.ties += 1

    def reset(self) -> None:
        self.total_games = 0
        self.player_wins = 0
        self.dealer_wins = 0
        self.ties = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
