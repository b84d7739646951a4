"""Core width-constrained segmentation and truncation.

Everything in this package is synchronous and free of UI dependencies so it can
be driven from the TUI widget, the CLI, or plain library code.
"""
