"""HTTP API for the BigInteger calculator."""
