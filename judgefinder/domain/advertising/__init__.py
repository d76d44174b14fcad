"""Advertising module domain layer."""
