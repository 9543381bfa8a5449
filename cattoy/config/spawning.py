"""Spawning and population configuration constants."""

# Population caps
MAX_ENTITIES = 18
BOUNCE_MAX_ENTITIES = 30

# Interval spawner gate, in milliseconds
SPAWN_INTERVAL_MS = 1400
BOUNCE_SPAWN_INTERVAL_MS = 1000

# Fish created at start-up in the aquarium preset
INITIAL_FISH_COUNT = 6

# Keep random spawn positions this far from the edges
SPAWN_MARGIN = 50

# Size ranges (radius/scale) for new entities
AQUARIUM_SIZE_RANGE = (22.0, 48.0)
BOUNCE_SIZE_RANGE = (12.0, 36.0)

# Aquarium initial velocity: components drawn in +/- this range, then
# normalised and rescaled to a speed in SPAWN_SPEED_RANGE (units/second)
INITIAL_VELOCITY_RANGE = 60.0
SPAWN_SPEED_RANGE = (20.0, 80.0)
ZERO_VECTOR_DIVISOR = 40.0

# Bounce presets draw each velocity component in +/- this range (units/frame)
BOUNCE_SPEED = 2.5
