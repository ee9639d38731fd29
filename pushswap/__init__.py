"""The two push_swap stacks, their operations, and a command that prints them."""

__version__ = "0.1.0"

__all__ = ["__version__"]