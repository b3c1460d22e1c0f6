"""Branded AI meal images for Instagram."""
