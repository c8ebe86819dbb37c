"""Orchestration and command-line entry point for text-on-image."""

__version__ = "0.1.0"
