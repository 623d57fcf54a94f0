"""Rewarder utilities."""

from __future__ import annotations

from quarry_mine import checked
from quarry_mine.errors import InvalidSnapshot
from quarry_mine.state import RewarderSnapshot


def compute_quarry_annual_rewards_rate(
    rewarder: RewarderSnapshot, rewards_share: int
) -> int:
    """Annual rewards a quarry receives for ``rewards_share`` of the rewarder."""
    if rewards_share < 0 or rewards_share > rewarder.total_rewards_shares:
        raise InvalidSnapshot(
            f"rewards_share {rewards_share} outside 0..{rewarder.total_rewards_shares}"
        )
    if (
        rewarder.total_rewards_shares == 0
        or rewarder.annual_rewards_rate == 0
        or rewards_share == 0
    ):
        return 0

    rate = checked.mul(rewarder.annual_rewards_rate, rewards_share, 128)
    rate = checked.div(rate, rewarder.total_rewards_shares)
    return checked.fit(rate, 64, "quarry annual rewards rate")
