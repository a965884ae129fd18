"""Scanning, matching and removal of target directories."""
