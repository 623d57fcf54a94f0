"""Protocol constants for the quarry mine program."""

U8_MAX = 2**8 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1
U192_MAX = 2**192 - 1
I64_MAX = 2**63 - 1

# Maximum number of tokens a rewarder may distribute per year.
MAX_ANNUAL_REWARDS_RATE = U64_MAX >> 3
