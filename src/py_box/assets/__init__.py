"""Packaged data: word lists and editor templates."""
