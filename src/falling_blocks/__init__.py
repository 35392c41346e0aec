"""Falling Blocks package."""
