"""Representation constants for BigInteger.

Values are stored as little-endian limbs in base RADIX, each limb holding
RADIX_DIGITS decimal digits.
"""

# Decimal digits per limb
RADIX_DIGITS = 4

# Base of a single limb (limb values lie in [0, RADIX))
RADIX = 10**RADIX_DIGITS

# Maximum number of decimal digits a value may hold before overflow
MAX_DECIMAL_DIGITS = 30_000

# Limb capacity implied by the digit bound (7,500 limbs)
MAX_LIMBS = MAX_DECIMAL_DIGITS // RADIX_DIGITS
