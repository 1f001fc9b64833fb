"""Display and logging helpers."""
