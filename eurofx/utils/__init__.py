"""Shared helpers for eurofx."""
