"""Rewarder split tests."""

import pytest

from quarry_mine.config import MAX_ANNUAL_REWARDS_RATE
from quarry_mine.errors import InvalidSnapshot
from quarry_mine.rewarder import compute_quarry_annual_rewards_rate
from quarry_mine.state import RewarderSnapshot


@pytest.mark.parametrize(
    "share,expected",
    [(0, 0), (1, 333), (2, 666), (3, 1_000)],
)
def test_split_by_share(share, expected):
    rewarder = RewarderSnapshot(annual_rewards_rate=1_000, total_rewards_shares=3)
    assert compute_quarry_annual_rewards_rate(rewarder, share) == expected


def test_split_never_exceeds_rewarder_rate():
    rewarder = RewarderSnapshot(annual_rewards_rate=MAX_ANNUAL_REWARDS_RATE, total_rewards_shares=7)
    total = sum(compute_quarry_annual_rewards_rate(rewarder, 1) for _ in range(7))
    assert total <= MAX_ANNUAL_REWARDS_RATE
    assert MAX_ANNUAL_REWARDS_RATE - total < 7


def test_no_shares():
    rewarder = RewarderSnapshot(annual_rewards_rate=1_000, total_rewards_shares=0)
    assert compute_quarry_annual_rewards_rate(rewarder, 0) == 0


def test_zero_rate():
    rewarder = RewarderSnapshot(annual_rewards_rate=0, total_rewards_shares=10)
    assert compute_quarry_annual_rewards_rate(rewarder, 5) == 0


@pytest.mark.parametrize("share", [-1, 4])
def test_share_out_of_range(share):
    rewarder = RewarderSnapshot(annual_rewards_rate=1_000, total_rewards_shares=3)
    with pytest.raises(InvalidSnapshot):
        compute_quarry_annual_rewards_rate(rewarder, share)
