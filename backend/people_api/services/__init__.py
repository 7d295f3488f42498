"""Service Layer — the people resource and its process-wide store."""
