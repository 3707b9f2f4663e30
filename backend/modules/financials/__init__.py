"""Financial tracking and incident log module."""
