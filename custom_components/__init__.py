"""Custom components module."""
