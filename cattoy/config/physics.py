"""Physics configuration constants."""

# Largest frame step in seconds; protects against jumps after a stall
MAX_DT = 0.05

# Pointer attraction
ATTRACTION_STRENGTH = 2000.0
ATTRACTION_DAMPING = 0.8
MIN_ATTRACTION_DISTANCE = 10.0

# Idle drift oscillation
DRIFT_ACCELERATION = 6.0
DRIFT_FREQUENCY = 0.001

# Speed clamp; effective maximum is BASE_MAX_SPEED * speed multiplier
BASE_MAX_SPEED = 220.0

# Screen-wrap margin in pixels
WRAP_MARGIN = 60.0

# Entities older than this are pruned (milliseconds)
ENTITY_LIFETIME_MS = 120000.0

# Speed controls
DEFAULT_SPEED = 1.0
SPEED_MIN = 0.1
SPEED_MAX = 3.0
SPEED_STEP = 0.1
SPEED_FACTOR_STEP = 0.25
