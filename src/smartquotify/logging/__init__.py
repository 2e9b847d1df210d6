"""Logging helpers and factories for smartquotify."""
