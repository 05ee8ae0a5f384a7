"""Core engine: filesystems, initializer resolution and execution."""
