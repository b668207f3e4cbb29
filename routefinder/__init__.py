"""Longest building route finder."""
