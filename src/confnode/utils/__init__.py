"""Shared helpers for the configuration tree package."""
