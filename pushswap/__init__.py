"""Two-stack integer sorting with a restricted set of operations."""

__version__ = "0.1.0"
__all__ = ["stacks", "parsing", "algorithms", "benchmark", "cli"]