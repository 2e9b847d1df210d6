"""Command line parsing for smartquotify."""
