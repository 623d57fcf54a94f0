"""Snapshot value types for quarry mine program state.

Each snapshot mirrors the reward-relevant fields of one on-chain account.
Values are plain integers in the program's native units and widths; they are
validated once on construction and never mutated afterwards. ``from_account``
converts an already-decoded account (a mapping keyed by the program's field
names) into a snapshot at the system boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from quarry_mine.config import (
    I64_MAX,
    MAX_ANNUAL_REWARDS_RATE,
    U8_MAX,
    U64_MAX,
    U128_MAX,
)
from quarry_mine.errors import InvalidSnapshot


def _check_range(name: str, value: Any, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSnapshot(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidSnapshot(f"{name} must be non-negative, got {value}")
    if value > upper:
        raise InvalidSnapshot(f"{name} out of range: {value} > {upper}")


def _check_key(name: str, value: Any) -> None:
    if value is not None and not isinstance(value, Pubkey):
        raise InvalidSnapshot(
            f"{name} must be a Pubkey, got {type(value).__name__}"
        )


def _field(fields: Mapping[str, Any], name: str, account: str) -> Any:
    try:
        return fields[name]
    except KeyError:
        raise InvalidSnapshot(f"{account} account missing field: {name}") from None


def _pubkey(value: Any) -> Pubkey | None:
    if value is None or isinstance(value, Pubkey):
        return value
    try:
        if isinstance(value, str):
            return Pubkey.from_string(value)
        return Pubkey.from_bytes(bytes(value))
    except (TypeError, ValueError) as e:
        raise InvalidSnapshot(f"invalid pubkey {value!r}: {e}") from e


@dataclass(frozen=True)
class PoolSnapshot:
    famine_time: int  # i64
    last_checkpoint_time: int  # i64
    annual_rate: int  # u64
    reward_per_token_stored: int  # u128
    total_deposited: int  # u64
    token_decimals: int = 0  # u8
    rewards_share: int = 0  # u64
    key: Pubkey | None = None

    def __post_init__(self) -> None:
        _check_range("famine_time", self.famine_time, I64_MAX)
        _check_range("last_checkpoint_time", self.last_checkpoint_time, I64_MAX)
        _check_range("annual_rate", self.annual_rate, U64_MAX)
        _check_range("reward_per_token_stored", self.reward_per_token_stored, U128_MAX)
        _check_range("total_deposited", self.total_deposited, U64_MAX)
        _check_range("token_decimals", self.token_decimals, U8_MAX)
        _check_range("rewards_share", self.rewards_share, U64_MAX)
        _check_key("key", self.key)

    @classmethod
    def from_account(
        cls, fields: Mapping[str, Any], key: Pubkey | None = None
    ) -> PoolSnapshot:
        """Build a snapshot from a decoded Quarry account."""
        return cls(
            famine_time=_field(fields, "famine_ts", "quarry"),
            last_checkpoint_time=_field(fields, "last_update_ts", "quarry"),
            annual_rate=_field(fields, "annual_rewards_rate", "quarry"),
            reward_per_token_stored=_field(fields, "rewards_per_token_stored", "quarry"),
            total_deposited=_field(fields, "total_tokens_deposited", "quarry"),
            token_decimals=fields.get("token_mint_decimals", 0),
            rewards_share=fields.get("rewards_share", 0),
            key=_pubkey(key),
        )


@dataclass(frozen=True)
class ParticipantSnapshot:
    deposited: int  # u64
    reward_per_token_paid: int  # u128
    reward_accrued: int  # u64
    quarry_key: Pubkey | None = None

    def __post_init__(self) -> None:
        _check_range("deposited", self.deposited, U64_MAX)
        _check_range("reward_per_token_paid", self.reward_per_token_paid, U128_MAX)
        _check_range("reward_accrued", self.reward_accrued, U64_MAX)
        _check_key("quarry_key", self.quarry_key)

    @classmethod
    def from_account(cls, fields: Mapping[str, Any]) -> ParticipantSnapshot:
        """Build a snapshot from a decoded Miner account."""
        return cls(
            deposited=_field(fields, "balance", "miner"),
            reward_per_token_paid=_field(fields, "rewards_per_token_paid", "miner"),
            reward_accrued=_field(fields, "rewards_earned", "miner"),
            quarry_key=_pubkey(fields.get("quarry_key")),
        )


@dataclass(frozen=True)
class RewarderSnapshot:
    annual_rewards_rate: int  # u64
    total_rewards_shares: int  # u64
    key: Pubkey | None = None

    def __post_init__(self) -> None:
        _check_range("annual_rewards_rate", self.annual_rewards_rate, MAX_ANNUAL_REWARDS_RATE)
        _check_range("total_rewards_shares", self.total_rewards_shares, U64_MAX)
        _check_key("key", self.key)

    @classmethod
    def from_account(
        cls, fields: Mapping[str, Any], key: Pubkey | None = None
    ) -> RewarderSnapshot:
        """Build a snapshot from a decoded Rewarder account."""
        return cls(
            annual_rewards_rate=_field(fields, "annual_rewards_rate", "rewarder"),
            total_rewards_shares=_field(fields, "total_rewards_shares", "rewarder"),
            key=_pubkey(key),
        )
