"""Textual widgets and viewer app."""
