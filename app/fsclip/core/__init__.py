"""Core infrastructure: errors, paths, settings, theme and logging."""
