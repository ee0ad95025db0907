"""whatlocks: find which items lock a character skill, and for how long."""

__version__ = "0.1.0"
