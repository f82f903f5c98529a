"""Kilo Cloud agent tool."""
