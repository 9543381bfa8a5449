"""Display and UI configuration constants."""

# Default window size in pixels (resizable at runtime)
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 640

# The frame rate for the game loop, in frames per second
FRAME_RATE = 60

# Vertical background gradient (RGBA, alpha in 0-1) composited over black
BACKGROUND_TOP_RGBA = (10, 16, 28, 0.6)
BACKGROUND_BOTTOM_RGBA = (4, 8, 16, 0.95)
CLEAR_COLOR = (0, 0, 0)
BOUNCE_BACKGROUND_COLOR = (18, 18, 24)

# Entity colors
FISH_COLOR = (255, 140, 105)  # #ff8c69
DOT_COLOR = (255, 45, 85)  # #ff2d55
LASER_COLOR = (255, 30, 30)
EYE_COLOR = (255, 255, 255)
PUPIL_COLOR = (0, 0, 0)
BOUNCE_PALETTE = (
    (255, 140, 105),
    (255, 45, 85),
    (90, 200, 250),
    (255, 204, 0),
    (52, 199, 89),
    (175, 82, 222),
)

# Pointer indicator ring
POINTER_RING_RADIUS = 14
POINTER_RING_WIDTH = 3
POINTER_RING_RGBA = (255, 255, 255, 0.12)

# Laser glow ring around dots in the laser preset
LASER_GLOW_ALPHA = 0.25
LASER_GLOW_SCALE = 2.2

# HUD
HUD_FONT_SIZE = 22
HUD_TEXT_COLOR = (200, 200, 210)
HUD_PAUSED_COLOR = (255, 220, 120)
HINT_TEXT = "Tap or click to play"
HINT_COLOR = (230, 230, 240)

# UI Display Constants
SEPARATOR_WIDTH = 60  # Width of separator lines in console output
