"""Build and run cost estimation for company assets."""

__version__ = "0.1.0"
