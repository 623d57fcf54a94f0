"""Client-side mirror of the quarry mine program's reward payroll.

Rewards accrue per staked token in a fixed-point accumulator, following
Synthetix's StakingRewards: between checkpoints the pool's annual rate is
spread over the elapsed seconds and divided among all deposited tokens. The
arithmetic reproduces the program's integer operations in the same order so
predictions match on-chain values exactly, and every step is checked against
the program's integer widths instead of wrapping.
"""

from __future__ import annotations

import logging

from quarry_mine import checked
from quarry_mine.config import I64_MAX
from quarry_mine.errors import InvalidSnapshot, UpperboundExceeded
from quarry_mine.state import ParticipantSnapshot, PoolSnapshot

logger = logging.getLogger("quarry_mine.payroll")

SECONDS_PER_YEAR = 86_400 * 365

# Fixed-point scale of ``reward_per_token_stored``. Must match the program
# bit-for-bit: u64::MAX, not 2**64.
PRECISION_MULTIPLIER = 2**64 - 1


def _check_now(now: int) -> None:
    if isinstance(now, bool) or not isinstance(now, int):
        raise InvalidSnapshot(
            f"timestamp must be an integer, got {type(now).__name__}"
        )
    if now < 0:
        raise InvalidSnapshot(f"timestamp must be non-negative, got {now}")
    if now > I64_MAX:
        raise InvalidSnapshot(f"timestamp out of range: {now} > {I64_MAX}")


class Payroll:
    """Reward calculator over a single :class:`PoolSnapshot`."""

    def __init__(self, pool: PoolSnapshot) -> None:
        self.pool = pool

    def __repr__(self) -> str:
        return f"Payroll({self.pool!r})"

    def last_time_reward_applicable(self, now: int) -> int:
        """Latest timestamp rewards were being distributed, capped by famine."""
        return min(now, self.pool.famine_time)

    def time_worked(self, now: int) -> int:
        """Seconds the pool accrued rewards since its last checkpoint.

        Backdated queries clamp to zero instead of going negative.
        """
        _check_now(now)
        return max(
            0,
            self.last_time_reward_applicable(now) - self.pool.last_checkpoint_time,
        )

    def reward_per_token(self, now: int) -> int:
        """Up-to-date rewards per staked token, scaled by PRECISION_MULTIPLIER."""
        _check_now(now)
        pool = self.pool
        if pool.total_deposited == 0:
            return pool.reward_per_token_stored

        reward = checked.mul(self.time_worked(now), PRECISION_MULTIPLIER)
        reward = checked.mul(reward, pool.annual_rate)
        reward = checked.div(reward, SECONDS_PER_YEAR)
        reward = checked.div(reward, pool.total_deposited)
        increment = checked.fit(reward, 128, "reward per token increment")
        return checked.add(pool.reward_per_token_stored, increment, 128)

    def rewards_earned(self, participant: ParticipantSnapshot, now: int) -> int:
        """Total rewards owed to ``participant`` at ``now``, including accrued."""
        self._check_participant(participant)
        current = self.reward_per_token(now)
        if participant.reward_per_token_paid > current:
            raise InvalidSnapshot(
                f"reward_per_token_paid {participant.reward_per_token_paid} "
                f"is ahead of reward_per_token {current}"
            )
        net_new_rewards = current - participant.reward_per_token_paid
        earned = checked.mul(participant.deposited, net_new_rewards)
        earned = checked.div(earned, PRECISION_MULTIPLIER)
        earned = checked.add(earned, participant.reward_accrued, 192)
        return checked.fit(earned, 128, "rewards earned")

    def claimable_upper_bound(self, now: int, reward_per_token_paid: int) -> int:
        """Most rewards a participant could claim, given the pool's own accrual.

        Sum of everything the pool accrued since its checkpoint and everything
        it owed its whole deposit base before it.
        """
        pool = self.pool
        if reward_per_token_paid > pool.reward_per_token_stored:
            raise InvalidSnapshot(
                f"reward_per_token_paid {reward_per_token_paid} is ahead of "
                f"reward_per_token_stored {pool.reward_per_token_stored}"
            )
        accrued = checked.mul(self.time_worked(now), pool.annual_rate)
        accrued = checked.div(accrued, SECONDS_PER_YEAR)

        net_rewards_per_token = pool.reward_per_token_stored - reward_per_token_paid
        owed = checked.mul(net_rewards_per_token, pool.total_deposited)
        owed = checked.div(owed, PRECISION_MULTIPLIER)
        return checked.add(accrued, owed, 192)

    def sanity_check(
        self,
        now: int,
        amount_claimable: int,
        participant: ParticipantSnapshot,
    ) -> None:
        """Reject a claimable amount the pool could not have paid out.

        An off-by-one excess is tolerated, as the program does.
        """
        upper_bound = self.claimable_upper_bound(now, participant.reward_per_token_paid)
        if amount_claimable < participant.reward_accrued:
            raise InvalidSnapshot(
                f"amount_claimable {amount_claimable} is below already "
                f"accrued {participant.reward_accrued}"
            )
        newly_claimable = amount_claimable - participant.reward_accrued
        if upper_bound >= newly_claimable:
            return

        logger.warning(
            "claimable rewards above upper bound: now=%d upper_bound=%d "
            "amount_claimable=%d pool=%r participant=%r",
            now,
            upper_bound,
            amount_claimable,
            self.pool,
            participant,
        )
        if upper_bound + 1 < amount_claimable:
            raise UpperboundExceeded(
                f"amount_claimable {amount_claimable} exceeds upper bound {upper_bound}"
            )

    def _check_participant(self, participant: ParticipantSnapshot) -> None:
        pool = self.pool
        if participant.deposited > pool.total_deposited:
            raise InvalidSnapshot(
                f"participant deposited {participant.deposited} exceeds pool "
                f"total_deposited {pool.total_deposited}"
            )
        if (
            pool.key is not None
            and participant.quarry_key is not None
            and participant.quarry_key != pool.key
        ):
            raise InvalidSnapshot(
                f"participant mines quarry {participant.quarry_key}, not {pool.key}"
            )


def reward_per_token(pool: PoolSnapshot, now: int) -> int:
    return Payroll(pool).reward_per_token(now)


def rewards_earned(
    pool: PoolSnapshot, participant: ParticipantSnapshot, now: int
) -> int:
    return Payroll(pool).rewards_earned(participant, now)
