"""Command-line interface for asset-index."""
