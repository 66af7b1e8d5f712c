"""In-memory bank desk: users, accounts, card-to-card transfers and a text console."""

__version__ = "0.1.0"
__all__ = ["models", "registry", "transfer", "views", "editing", "cli"]