"""Gridkit runtime configuration, logging and error policy."""
