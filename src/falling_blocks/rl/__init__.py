"""Reinforcement-learning helpers for Falling Blocks."""
