"""Utility modules for ossready."""
