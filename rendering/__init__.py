"""Pygame rendering for the cat toy screensaver."""
