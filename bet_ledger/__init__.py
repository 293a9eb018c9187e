"""Horse-racing bet ledger with profit/loss and running bank calculation."""

__version__ = "0.1.0"
