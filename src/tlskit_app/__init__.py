"""Command-line interface for tlskit."""
