"""Command-line interface for risparse."""
