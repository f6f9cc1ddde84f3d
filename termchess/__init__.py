"""Two-player terminal chess: a rules engine, its pieces and a text front end."""

__version__ = "0.1.0"

__all__ = ["__version__"]