"""Utility helpers for wikiterm."""
