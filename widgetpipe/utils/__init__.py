"""Utility helpers for widgetpipe."""
