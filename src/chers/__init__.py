"""chers — a chess rule engine: legal moves, move execution, check and mate."""

__version__ = "0.1.0"
