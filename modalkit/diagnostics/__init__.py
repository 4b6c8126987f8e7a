"""Diagnostics helpers shared by runtime logging paths."""
