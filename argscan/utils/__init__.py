"""Utility helpers for argscan."""
