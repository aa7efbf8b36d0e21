"""Validation helpers for detection reports."""
