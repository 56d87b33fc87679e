"""Workout tracking services."""
