"""Judge profiles, court assignments and attorney advertising pricing."""

__version__ = "0.1.0"
