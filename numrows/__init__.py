"""Sorted integer table driven by a view-model that publishes typed edits."""

__version__ = "1.0.0"
