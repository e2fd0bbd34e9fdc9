"""Helpers for AASX packages: paths, XML, contracts and logging."""
