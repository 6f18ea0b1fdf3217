"""Python syntax highlighting."""
