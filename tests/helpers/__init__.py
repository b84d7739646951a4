"""Test helpers for linefit."""
