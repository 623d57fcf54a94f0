"""Predictions of quarry and miner state after program actions.

The program checkpoints a quarry and settles a miner on every stake, withdraw
and claim. These functions compute the snapshots it would persist, without
touching the inputs.
"""

from __future__ import annotations

import dataclasses
import logging
from enum import Enum

from quarry_mine import checked
from quarry_mine.errors import InsufficientBalance, InvalidSnapshot
from quarry_mine.payroll import Payroll
from quarry_mine.rewarder import compute_quarry_annual_rewards_rate
from quarry_mine.state import ParticipantSnapshot, PoolSnapshot, RewarderSnapshot

logger = logging.getLogger("quarry_mine.quarry")


class StakeAction(Enum):
    """An action a participant takes on a pool."""

    STAKE = "stake"
    WITHDRAW = "withdraw"


def checkpoint(
    pool: PoolSnapshot,
    now: int,
    rewarder: RewarderSnapshot | None = None,
) -> PoolSnapshot:
    """Pool state after the program brings its accumulator up to ``now``.

    With a ``rewarder``, the annual rate is re-synced from the pool's rewards
    share, as the program does after accruing at the old rate.
    """
    payroll = Payroll(pool)
    reward_per_token_stored = payroll.reward_per_token(now)
    if now < pool.last_checkpoint_time:
        last_checkpoint_time = pool.last_checkpoint_time
    else:
        last_checkpoint_time = payroll.last_time_reward_applicable(now)

    annual_rate = pool.annual_rate
    if rewarder is not None:
        annual_rate = compute_quarry_annual_rewards_rate(rewarder, pool.rewards_share)

    logger.debug(
        "checkpoint at %d: reward_per_token_stored %d -> %d",
        now,
        pool.reward_per_token_stored,
        reward_per_token_stored,
    )
    return dataclasses.replace(
        pool,
        reward_per_token_stored=reward_per_token_stored,
        last_checkpoint_time=last_checkpoint_time,
        annual_rate=annual_rate,
    )


def settle(
    pool: PoolSnapshot,
    participant: ParticipantSnapshot,
    now: int,
    rewarder: RewarderSnapshot | None = None,
) -> tuple[PoolSnapshot, ParticipantSnapshot]:
    """Pool and participant state after the program settles the participant."""
    payroll = Payroll(pool)
    updated_pool = checkpoint(pool, now, rewarder)

    earned = payroll.rewards_earned(participant, now)
    earned = checked.fit(earned, 64, "settled rewards")
    payroll.sanity_check(now, earned, participant)

    logger.debug(
        "settled participant at %d: reward_accrued %d -> %d",
        now,
        participant.reward_accrued,
        earned,
    )
    updated_participant = dataclasses.replace(
        participant,
        reward_accrued=earned,
        reward_per_token_paid=updated_pool.reward_per_token_stored,
    )
    return updated_pool, updated_participant


def process_stake_action(
    action: StakeAction,
    pool: PoolSnapshot,
    participant: ParticipantSnapshot,
    amount: int,
    now: int,
    rewarder: RewarderSnapshot | None = None,
) -> tuple[PoolSnapshot, ParticipantSnapshot]:
    """Pool and participant state after staking or withdrawing ``amount``."""
    if amount < 0:
        raise InvalidSnapshot(f"amount must be non-negative, got {amount}")
    if action is StakeAction.WITHDRAW and amount > participant.deposited:
        raise InsufficientBalance(
            f"cannot withdraw {amount}, participant deposited {participant.deposited}"
        )

    pool, participant = settle(pool, participant, now, rewarder)
    if action is StakeAction.STAKE:
        deposited = checked.add(participant.deposited, amount, 64)
        total_deposited = checked.add(pool.total_deposited, amount, 64)
    else:
        deposited = checked.sub(participant.deposited, amount)
        total_deposited = checked.sub(pool.total_deposited, amount)

    return (
        dataclasses.replace(pool, total_deposited=total_deposited),
        dataclasses.replace(participant, deposited=deposited),
    )
