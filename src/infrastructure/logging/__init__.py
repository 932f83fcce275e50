"""Logging package."""
