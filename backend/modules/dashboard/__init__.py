"""Read-only meet dashboard: standings and match cards."""
