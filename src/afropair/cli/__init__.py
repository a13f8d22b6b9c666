"""Command-line interface for AfroPair."""
