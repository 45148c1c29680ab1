from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .cards import DECK_SIZE, Card, Deck, cards_to_labels
from .dealer import choose_discards
from .evaluator import HAND_SIZE, classify, describe_rank, validate_hand, verdict
from .models import GameConfig, GameStats, HandEvaluation, Phase, Verdict

LOGGER = logging.getLogger("drawpoker.game")

# GameEngine keeps one heads-up draw round in memory at a time. Rendering,
# input and the win/lose presentation belong to the host.


def deal(deck: Deck) -> Tuple[List[Card], List[Card], Deck]:
    """Block deal from the front: first five cards to the player, next five to the dealer."""
    player = deck.draw(HAND_SIZE)
    dealer = deck.draw(HAND_SIZE)
    return player, dealer, deck


def validate_slots(slots: Iterable[int]) -> List[int]:
    ordered = list(slots)
    for slot in ordered:
        if isinstance(slot, bool) or not isinstance(slot, int):
            raise ValueError(f"Invalid discard slot: {slot!r}")
        if not 0 <= slot < HAND_SIZE:
            raise ValueError(f"Discard slot out of range: {slot}")
    if len(set(ordered)) != len(ordered):
        raise ValueError("Duplicate discard slot")
    return sorted(ordered)


def apply_replacements(hand: Sequence[Card], discard_slots: Iterable[int], deck: Deck) -> Tuple[List[Card], Deck]:
    """Overwrite each discarded slot, in ascending slot order, with the next card off the deck."""
    new_hand = list(validate_hand(hand))
    slots = validate_slots(discard_slots)
    if deck.remaining < len(slots):
        raise ValueError("Not enough cards left in deck")
    for slot in slots:
        new_hand[slot] = deck.draw_one()
    return new_hand, deck


@dataclass
class RoundContext:
    # Everything mutable about the current round lives here.
    round_id: str
    seed: int
    deck: Deck
    player_hand: List[Card]
    dealer_hand: List[Card]
    phase: Phase = Phase.DEALT
    player_discards: List[int] = field(default_factory=list)
    dealer_discards: List[int] = field(default_factory=list)
    player_eval: Optional[HandEvaluation] = None
    dealer_eval: Optional[HandEvaluation] = None
    verdict: Optional[Verdict] = None
    events: List[Dict[str, object]] = field(default_factory=list)


class GameEngine:
    """Heads-up five-card draw: player versus a rule-based dealer."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.stats = GameStats()
        self.round_counter = 0
        self.round: Optional[RoundContext] = None

    # Round lifecycle -------------------------------------------------

    def start_round(self, seed: Optional[int] = None, deck: Optional[Deck] = None) -> RoundContext:
        if self.round and self.round.phase != Phase.COMPARED:
            raise RuntimeError("Round already in progress")

        if seed is None:
            seed = int(time.time() * 1000) & 0xFFFFFFFF
        if deck is None:
            deck = Deck.new_shuffled(seed=seed)
        elif deck.remaining != DECK_SIZE:
            raise ValueError("Round needs a fresh deck")
        player, dealer, deck = deal(deck)

        round_id = f"R-{time.strftime('%Y%m%d')}-{self.round_counter:05d}"
        self.round_counter += 1

        ctx = RoundContext(round_id=round_id, seed=seed, deck=deck, player_hand=player, dealer_hand=dealer)
        ctx.events.append(
            {
                "ev": "DEAL",
                "round_id": round_id,
                "seed": seed,
                "player": cards_to_labels(player),
                "dealer": cards_to_labels(dealer),
            }
        )
        ctx.phase = Phase.PLAYER_REPLACING
        self.round = ctx
        LOGGER.info("Round %s dealt (seed=%d)", round_id, seed)
        return ctx

    def replace_player(self, slots: Iterable[int] = ()) -> List[Card]:
        ctx = self._require_phase(Phase.PLAYER_REPLACING)
        ordered = validate_slots(slots)
        if len(ordered) > self.config.max_replacements:
            raise ValueError(f"At most {self.config.max_replacements} cards may be replaced")

        ctx.player_hand, ctx.deck = apply_replacements(ctx.player_hand, ordered, ctx.deck)
        ctx.player_discards = ordered
        ctx.events.append(
            {"ev": "PLAYER_REPLACE", "slots": ordered, "hand": cards_to_labels(ctx.player_hand)}
        )
        ctx.phase = Phase.DEALER_REPLACING
        return list(ctx.player_hand)

    def replace_dealer(self) -> List[Card]:
        ctx = self._require_phase(Phase.DEALER_REPLACING)
        slots = choose_discards(ctx.dealer_hand, self.config.dealer)[: self.config.max_replacements]

        ctx.dealer_hand, ctx.deck = apply_replacements(ctx.dealer_hand, slots, ctx.deck)
        ctx.dealer_discards = slots
        ctx.events.append(
            {"ev": "DEALER_REPLACE", "slots": slots, "count": len(slots), "hand": cards_to_labels(ctx.dealer_hand)}
        )

        ctx.player_eval = classify(ctx.player_hand)
        ctx.dealer_eval = classify(ctx.dealer_hand)
        ctx.phase = Phase.EVALUATED
        return list(ctx.dealer_hand)

    def showdown(self) -> Verdict:
        ctx = self._require_phase(Phase.EVALUATED)
        assert ctx.player_eval is not None and ctx.dealer_eval is not None

        result = verdict(ctx.player_eval, ctx.dealer_eval)
        ctx.verdict = result
        for side, hand, evaluation in (
            ("player", ctx.player_hand, ctx.player_eval),
            ("dealer", ctx.dealer_hand, ctx.dealer_eval),
        ):
            ctx.events.append(
                {
                    "ev": "SHOWDOWN",
                    "side": side,
                    "hand": cards_to_labels(hand),
                    "rank": describe_rank(evaluation),
                    "key": list(evaluation.key),
                }
            )
        ctx.events.append({"ev": "RESULT", "verdict": result.value})
        self.stats.record(result)
        ctx.phase = Phase.COMPARED
        LOGGER.info(
            "Round %s: player %s vs dealer %s -> %s",
            ctx.round_id,
            ctx.player_eval.category.value,
            ctx.dealer_eval.category.value,
            result.value,
        )
        return result

    def play_round(
        self, player_slots: Iterable[int] = (), seed: Optional[int] = None, deck: Optional[Deck] = None
    ) -> RoundContext:
        ctx = self.start_round(seed=seed, deck=deck)
        self.replace_player(player_slots)
        self.replace_dealer()
        self.showdown()
        return ctx

    def abandon_round(self) -> None:
        """Drop an in-progress round entirely; nothing is recorded."""
        if self.round and self.round.phase != Phase.COMPARED:
            LOGGER.info("Round %s abandoned in %s", self.round.round_id, self.round.phase.value)
        self.round = None

    def is_round_complete(self) -> bool:
        return bool(self.round and self.round.phase == Phase.COMPARED)

    def reset_stats(self) -> None:
        self.stats.reset()

    # Host helpers ----------------------------------------------------

    def consume_events(self) -> List[Dict[str, object]]:
        if not self.round:
            return []
        events = list(self.round.events)
        self.round.events.clear()
        return events

    def round_payload(self) -> Dict[str, object]:
        if not self.round:
            raise RuntimeError("Round not in progress")
        ctx = self.round
        payload: Dict[str, object] = {
            "round_id": ctx.round_id,
            "seed": ctx.seed,
            "phase": ctx.phase.value,
            "deck_remaining": ctx.deck.remaining,
            "player": {"hand": cards_to_labels(ctx.player_hand), "replaced": list(ctx.player_discards)},
            "dealer": {"hand": cards_to_labels(ctx.dealer_hand), "replaced": list(ctx.dealer_discards)},
            "stats": self.stats.as_dict(),
        }
        if ctx.player_eval and ctx.dealer_eval:
            payload["player"]["evaluation"] = ctx.player_eval.as_dict()  # type: ignore[index]
            payload["dealer"]["evaluation"] = ctx.dealer_eval.as_dict()  # type: ignore[index]
        if ctx.verdict is not None:
            payload["verdict"] = ctx.verdict.value
        return payload

    def _require_phase(self, phase: Phase) -> RoundContext:
        if not self.round:
            raise RuntimeError("Round not in progress")
        if self.round.phase != phase:
            raise RuntimeError(f"Expected phase {phase.value}, round is in {self.round.phase.value}")
        return self.round
