"""Shared utilities: structured logging and display formatting."""
