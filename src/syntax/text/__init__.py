"""Plain text syntax highlighting."""
