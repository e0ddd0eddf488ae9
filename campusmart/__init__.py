"""campusmart: local persistence core for the campus marketplace app."""

__version__ = "0.1.0"
