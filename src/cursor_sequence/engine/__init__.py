"""Drivers that consume cursor sequences."""
