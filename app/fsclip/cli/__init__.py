"""Command-line interface for fsclip."""
