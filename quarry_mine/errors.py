"""Errors raised by the reward accounting calculators."""


class QuarryError(Exception):
    """Base class for all quarry_mine errors."""


class InvalidSnapshot(QuarryError, ValueError):
    """A snapshot field or combination of snapshots violates an invariant."""


class ArithmeticOverflow(QuarryError, ArithmeticError):
    """An intermediate or result exceeded its fixed integer width."""


class UpperboundExceeded(QuarryError):
    """Claimable rewards exceed what the pool could have accrued."""


class InsufficientBalance(QuarryError, ValueError):
    """A withdrawal exceeds the participant's deposited balance."""
