"""CLI command groups for taskkeeper."""
