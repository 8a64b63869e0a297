"""REST-style CRUD service for the Monopoly `Player` table."""

__version__ = "0.1.0"
