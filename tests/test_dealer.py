import pytest

from drawpoker.cards import new_shuffled_deck
from drawpoker.dealer import choose_dealer_discards, choose_discards, straight_draw
from drawpoker.evaluator import classify
from drawpoker.models import DealerConfig, HandCategory

from .helpers import hand


@pytest.mark.parametrize(
    "labels",
    [
        "9c 8c 7c 6c 5c",  # straight flush
        "4s 4h 4d 4c Ks",  # four of a kind
        "Jh Jd Js 3c 3d",  # full house
    ],
)
def test_strong_hands_stand_pat(labels):
    assert choose_discards(hand(labels)) == []


def test_three_of_a_kind_keeps_the_trips():
    assert choose_discards(hand("Ks Kd Kc 5h 2s")) == [3, 4]
    assert choose_discards(hand("5h Ks 2s Kd Kc")) == [0, 2]


def test_two_pair_replaces_the_odd_card():
    assert choose_discards(hand("7h 7d 4s 4c As")) == [4]
    assert choose_discards(hand("Qh 7d 4s 7c 4d")) == [0]


def test_one_pair_replaces_the_two_lowest_kickers():
    assert choose_discards(hand("6h 6s Qh 8d 4c")) == [3, 4]
    assert choose_discards(hand("2c 9d 9s 3h Kd")) == [0, 3]


def test_four_flush_replaces_the_off_suit_card():
    assert choose_discards(hand("Ah Jh 9h 6h 2s")) == [4]
    assert choose_discards(hand("3c Kd 8d 5d Jd")) == [0]


def test_open_ended_straight_draw_replaces_the_stray_card():
    assert straight_draw(hand("9h 8d 7c 6s Kh")) == [4]
    assert choose_discards(hand("9h 8d 7c 6s Kh")) == [4]


def test_inside_straight_draw_with_low_ace():
    assert choose_discards(hand("As 2d 3c 5h 9s")) == [4]


def test_without_a_draw_keep_the_top_two():
    assert straight_draw(hand("As Kd 8c 5h 2s")) == []
    assert choose_discards(hand("As Kd 8c 5h 2s")) == [2, 3, 4]
    assert choose_discards(hand("4s 8d Kc 2h Qs")) == [0, 1, 3]


def test_straight_draws_can_be_disabled():
    config = DealerConfig(straight_draws=False)
    assert choose_discards(hand("9h 8d 7c 6s Kh"), config) == [1, 2, 3]


def test_strong_flush_stands_and_weak_flush_redraws():
    assert choose_discards(hand("Ah Jh 9h 6h 2h")) == []
    assert choose_discards(hand("9d 7d 5d 4d 2d")) == [2, 3, 4]
    assert choose_discards(hand("9d 7d 5d 4d 2d"), DealerConfig(flush_stand_high=9)) == []


def test_strong_straight_stands_and_weak_straight_redraws():
    assert choose_discards(hand("9h 8d 7c 6s 5h")) == []
    # The wheel is below the default cutoff; it chases a six by dropping the ace.
    assert choose_discards(hand("As 2d 3c 4h 5s")) == [0]
    assert choose_discards(hand("As 2d 3c 4h 5s"), DealerConfig(straight_stand_high=5)) == []


def test_stand_pat_cutoff_is_monotonic_in_strength():
    config = DealerConfig()
    straights = ["As 2d 3c 4h 5s", "2s 3d 4c 5h 6s", "3s 4d 5c 6h 7s", "4s 5d 6c 7h 8s", "Ts Jd Qc Kh As"]
    stands = [choose_discards(hand(labels), config) == [] for labels in straights]
    # Once a straight stands pat, every stronger straight does too.
    assert stands == sorted(stands)
    assert stands[-1] is True


def test_policy_is_deterministic():
    deck = new_shuffled_deck(seed=99)
    for _ in range(10):
        cards = deck.draw(5)
        assert choose_dealer_discards(cards) == choose_dealer_discards(list(cards))


def test_policy_never_discards_more_than_three_distinct_slots():
    for seed in range(300):
        cards = new_shuffled_deck(seed=seed).draw(5)
        slots = choose_discards(cards)
        assert len(slots) <= 3
        assert slots == sorted(set(slots))
        assert all(0 <= slot <= 4 for slot in slots)
        if classify(cards).category == HandCategory.THREE_OF_A_KIND:
            trips = [idx for idx in range(5) if idx not in slots]
            assert len({cards[idx].rank for idx in trips}) == 1


def test_policy_rejects_malformed_hands():
    with pytest.raises(ValueError, match="exactly 5"):
        choose_discards(hand("As Kd 8c 5h"))
