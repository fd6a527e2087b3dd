"""Core components of quakefeed."""
