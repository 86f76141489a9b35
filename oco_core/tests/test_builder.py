"""
Tests for the OCO job builder.

Run with: pytest oco_core/tests/test_builder.py -v
"""

import itertools
from dataclasses import replace

import pytest

from oco_core.application.builder import (
    build_leg,
    build_oco_job,
    make_limit_leg,
    make_trailing_leg,
)
from oco_core.domain.draft import BracketSide, DraftState
from oco_core.domain.jobs import (
    Direction,
    JobType,
    LimitOrderLeg,
    TickTrigger,
    TrailingStopLeg,
)


@pytest.fixture
def instrument():
    return TickTrigger(exchange="binance", base="BTC", counter="USD")


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def full_draft():
    """Both sides populated, low as a limit order and high as a trailing stop."""
    return DraftState(
        low_price="100",
        low_limit_price="99",
        low_trailing=False,
        high_price="200",
        high_limit_price="185",
        high_trailing=True,
        initial_trailing_stop="190",
        amount="1.5",
        direction=Direction.SELL,
    )


class TestScenarios:
    """Worked examples of stop-loss / take-profit drafts."""

    def test_low_limit_only(self, instrument):
        draft = DraftState(
            low_price="100",
            low_limit_price="99",
            low_trailing=False,
            high_price="",
            amount="1",
            direction=Direction.BUY,
        )

        job = build_oco_job(draft, instrument)

        assert job.low.threshold_as_string == "100"
        assert job.low.leg.job_type == JobType.LIMIT_ORDER
        assert job.low.leg.job_type.value == "LIMIT_ORDER"
        assert job.low.leg.limit_price == "99"
        assert job.high is None

    def test_high_trailing_only(self, instrument):
        draft = DraftState(
            low_price="",
            high_price="200",
            high_trailing=True,
            initial_trailing_stop="190",
            high_limit_price="185",
            amount="2",
            direction=Direction.SELL,
        )

        job = build_oco_job(draft, instrument)

        assert job.low is None
        leg = job.high.leg
        assert leg.job_type.value == "SOFT_TRAILING_STOP"
        assert leg.start_price == "200"
        assert leg.last_sync_price == "200"
        assert leg.stop_price == "190"
        assert leg.limit_price == "185"
        assert leg.amount == "2"
        assert leg.direction is Direction.SELL

    def test_empty_bracket_is_still_built(self, instrument):
        job = build_oco_job(DraftState(), instrument)

        assert job.low is None
        assert job.high is None
        assert job.is_empty
        assert job.job_type.value == "OCO"
        assert job.id


class TestSideSelection:

    @pytest.mark.parametrize("side", [BracketSide.LOW, BracketSide.HIGH])
    def test_blank_threshold_gives_no_binding(self, instrument, full_draft, side):
        attribute = "low_price" if side is BracketSide.LOW else "high_price"
        draft = replace(full_draft, **{attribute: ""})

        job = build_oco_job(draft, instrument)

        assert getattr(job, side.value) is None
        other = BracketSide.HIGH if side is BracketSide.LOW else BracketSide.LOW
        assert getattr(job, other.value) is not None

    def test_limit_leg_copies_side_fields(self, instrument, full_draft):
        job = build_oco_job(full_draft, instrument)

        leg = job.low.leg
        assert isinstance(leg, LimitOrderLeg)
        assert leg.limit_price == full_draft.low_limit_price
        assert leg.amount == full_draft.amount
        assert leg.direction == full_draft.direction

    def test_trailing_leg_copies_side_fields(self, instrument, full_draft):
        draft = replace(full_draft, low_trailing=True)

        leg = build_oco_job(draft, instrument).low.leg

        assert isinstance(leg, TrailingStopLeg)
        assert leg.start_price == draft.low_price
        assert leg.last_sync_price == draft.low_price
        assert leg.stop_price == draft.initial_trailing_stop
        assert leg.limit_price == draft.low_limit_price

    def test_both_legs_share_direction_amount_and_trigger(self, instrument, full_draft):
        job = build_oco_job(full_draft, instrument)

        low, high = job.legs
        assert low.direction == high.direction == Direction.SELL
        assert low.amount == high.amount == "1.5"
        assert low.trigger == high.trigger == job.trigger == instrument

    def test_build_leg_uses_trailing_flag_of_its_side(self, instrument, full_draft):
        assert isinstance(build_leg(full_draft, BracketSide.LOW, instrument), LimitOrderLeg)
        assert isinstance(build_leg(full_draft, BracketSide.HIGH, instrument), TrailingStopLeg)


class TestPassThrough:

    def test_malformed_numbers_are_kept_verbatim(self, instrument):
        draft = DraftState(low_price="abc", low_limit_price="1,5", amount="lots")

        job = build_oco_job(draft, instrument)

        assert job.low.threshold_as_string == "abc"
        assert job.low.leg.limit_price == "1,5"
        assert job.low.leg.amount == "lots"

    def test_instrument_is_copied_by_value(self, full_draft):
        class Coin:
            exchange = "kraken"
            base = "ETH"
            counter = "EUR"

        coin = Coin()
        job = build_oco_job(full_draft, coin)
        coin.exchange = "bitfinex"

        assert job.trigger == TickTrigger(exchange="kraken", base="ETH", counter="EUR")
        assert job.low.leg.trigger.exchange == "kraken"

    def test_draft_is_not_modified(self, instrument, full_draft):
        before = full_draft.to_dict()
        build_oco_job(full_draft, instrument)
        assert full_draft.to_dict() == before


class TestIdentifiers:

    def test_job_and_leg_ids_are_drawn_from_generator(self, instrument, full_draft, sequential_ids):
        job = build_oco_job(full_draft, instrument, new_id=sequential_ids)

        assert job.id == "id-1"
        assert job.low.leg.id == "id-2"
        assert job.high.leg.id == "id-3"

    def test_ids_are_unique_across_builds(self, instrument, full_draft):
        first = build_oco_job(full_draft, instrument)
        second = build_oco_job(full_draft, instrument)

        ids = [first.id, second.id] + [leg.id for leg in first.legs + second.legs]
        assert len(set(ids)) == 6

    def test_same_content_apart_from_ids(self, instrument, full_draft):
        def without_ids(job):
            data = job.to_dict()
            data.pop("id")
            for side in ("low", "high"):
                data[side]["job"].pop("id")
            return data

        first = build_oco_job(full_draft, instrument)
        second = build_oco_job(full_draft, instrument)

        assert without_ids(first) == without_ids(second)


class TestLegConstructors:

    def test_make_limit_leg(self, instrument):
        leg = make_limit_leg(
            new_id=lambda: "leg-1",
            direction=Direction.BUY,
            trigger=instrument,
            amount="3",
            limit_price="10",
        )

        assert leg == LimitOrderLeg(id="leg-1", direction=Direction.BUY, trigger=instrument, amount="3", limit_price="10")

    def test_make_trailing_leg_seeds_sync_price(self, instrument):
        leg = make_trailing_leg(
            new_id=lambda: "leg-2",
            direction=Direction.SELL,
            trigger=instrument,
            amount="3",
            start_price="50",
            stop_price="45",
            limit_price="44",
        )

        assert leg.last_sync_price == "50"
        assert leg.job_type is JobType.SOFT_TRAILING_STOP
