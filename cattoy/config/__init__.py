"""Configuration package for the cat toy simulation.

Constants are grouped by concern (display, spawning, physics) and the
dataclasses in ``simulation_config`` bundle them into named presets.
"""
