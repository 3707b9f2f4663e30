"""Staff directory module: staff members and their roles."""
