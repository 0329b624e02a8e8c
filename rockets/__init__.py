"""Descriptive analytics over a catalog of rocket launches."""
