"""Shared helpers for navtree."""
