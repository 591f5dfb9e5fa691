"""Constant tables shared across stubmatch modules."""
