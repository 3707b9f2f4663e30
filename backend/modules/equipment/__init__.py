# backend/modules/equipment/__init__.py
"""Equipment logistics module: inventory, checkout and check-in of meet equipment."""
