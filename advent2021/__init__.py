"""Solutions to selected days of a 2021 advent puzzle calendar."""

__version__ = "0.1.0"