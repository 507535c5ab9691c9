"""Utility helpers for taskkeeper."""
