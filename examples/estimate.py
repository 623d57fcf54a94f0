#!/usr/bin/env python3
"""Example CLI that projects quarry mining rewards from snapshot values."""

import argparse
import logging
import sys
import time

from quarry_mine import (
    ParticipantSnapshot,
    Payroll,
    PoolSnapshot,
    QuarryError,
    checkpoint,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Project quarry mining rewards")
    parser.add_argument("--famine-ts", type=int, required=True, help="Timestamp when rewards cease")
    parser.add_argument("--last-update-ts", type=int, required=True, help="Timestamp of the last checkpoint")
    parser.add_argument("--annual-rate", type=int, required=True, help="Quarry annual rewards rate")
    parser.add_argument("--rewards-per-token-stored", type=int, default=0)
    parser.add_argument("--total-deposited", type=int, required=True)
    parser.add_argument("--decimals", type=int, default=0, help="Staked token decimals")
    parser.add_argument("--balance", type=int, default=0, help="Miner balance")
    parser.add_argument("--rewards-per-token-paid", type=int, default=0)
    parser.add_argument("--rewards-earned", type=int, default=0, help="Miner rewards already earned")
    parser.add_argument(
        "--now",
        type=int,
        default=0,
        help="Timestamp to project to (0 = current time)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )
    now = args.now or int(time.time())

    try:
        pool = PoolSnapshot(
            famine_time=args.famine_ts,
            last_checkpoint_time=args.last_update_ts,
            annual_rate=args.annual_rate,
            reward_per_token_stored=args.rewards_per_token_stored,
            total_deposited=args.total_deposited,
            token_decimals=args.decimals,
        )
        miner = ParticipantSnapshot(
            deposited=args.balance,
            reward_per_token_paid=args.rewards_per_token_paid,
            reward_accrued=args.rewards_earned,
        )
        payroll = Payroll(pool)
        rpt = payroll.reward_per_token(now)
        earned = payroll.rewards_earned(miner, now)
        updated = checkpoint(pool, now)
    except QuarryError as e:
        # Unknown, not zero.
        print(f"Rewards currently unknown: {e}")
        sys.exit(1)

    scale = 10**pool.token_decimals
    print(f"=== Quarry (projected to {now}) ===")
    print(f"Total Deposited:          {pool.total_deposited / scale:,.{pool.token_decimals}f}")
    print(f"Annual Rewards Rate:      {pool.annual_rate}")
    print(f"Famine:                   {pool.famine_time}")
    print(f"Rewards Per Token:        {rpt}")
    print(f"Next Checkpoint Time:     {updated.last_checkpoint_time}")
    print()

    print("=== Miner ===")
    print(f"Balance:                  {miner.deposited / scale:,.{pool.token_decimals}f}")
    if pool.total_deposited:
        print(f"Share of Quarry:          {miner.deposited / pool.total_deposited * 100:.4f}%")
    print(f"Rewards Earned:           {earned}")
    print(f"Of Which Newly Accrued:   {earned - miner.reward_accrued}")


if __name__ == "__main__":
    main()
