"""Solutions to introductory judge problems and a command that runs them."""

__version__ = "0.1.0"
__all__ = ["arrays", "basics", "stars", "counting", "ordering", "editor", "cli"]