"""Institute teams entered into events."""
