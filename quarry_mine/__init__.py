from quarry_mine.config import MAX_ANNUAL_REWARDS_RATE
from quarry_mine.errors import (
    ArithmeticOverflow,
    InsufficientBalance,
    InvalidSnapshot,
    QuarryError,
    UpperboundExceeded,
)
from quarry_mine.payroll import (
    PRECISION_MULTIPLIER,
    SECONDS_PER_YEAR,
    Payroll,
    reward_per_token,
    rewards_earned,
)
from quarry_mine.quarry import (
    StakeAction,
    checkpoint,
    process_stake_action,
    settle,
)
from quarry_mine.rewarder import compute_quarry_annual_rewards_rate
from quarry_mine.state import (
    ParticipantSnapshot,
    PoolSnapshot,
    RewarderSnapshot,
)

__all__ = [
    "MAX_ANNUAL_REWARDS_RATE",
    "PRECISION_MULTIPLIER",
    "SECONDS_PER_YEAR",
    "ArithmeticOverflow",
    "InsufficientBalance",
    "InvalidSnapshot",
    "QuarryError",
    "UpperboundExceeded",
    "Payroll",
    "ParticipantSnapshot",
    "PoolSnapshot",
    "RewarderSnapshot",
    "StakeAction",
    "checkpoint",
    "compute_quarry_annual_rewards_rate",
    "process_stake_action",
    "reward_per_token",
    "rewards_earned",
    "settle",
]
