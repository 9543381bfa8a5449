"""Small helpers shared across the simulation."""
