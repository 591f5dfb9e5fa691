"""Typed data structures shared across stubmatch modules."""
