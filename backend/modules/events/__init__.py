"""Event programme module."""
