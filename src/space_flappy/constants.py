"""
constants.py: Centralized configuration for the game field, physics and drawing.
"""

# -------- Timing --------
FPS = 60                        # Display refresh rate driving the tick callback

# -------- Game World Config --------
FIELD_WIDTH = 800
FIELD_HEIGHT = 500
FOOTER_HEIGHT = 60              # Strip below the canvas for the score readout
ACTOR_X = 100                   # Fixed actor lane
SPRITE_SIZE = 30                # Visual size of the chick
HITBOX_SCALE = 0.6              # Hitbox is 60% of the sprite for forgiveness

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 50
GAP_HEIGHT = 150
SCROLL_SPEED = 2.0              # Horizontal speed (pixels/tick)
SPAWN_SPACING = 200             # Distance from the right edge before the next spawn
MIN_HEIGHT = 50                 # Lowest possible gap top
MIN_MARGIN = 50                 # Space kept below the gap bottom

# -------- Physics Config (Pixels / Tick) --------
GRAVITY = 0.5                   # Velocity added every tick
JUMP_IMPULSE = -8.0             # Velocity set by a jump
TILT_FACTOR = 0.05              # Radians of tilt per unit of velocity
MAX_TILT = 0.5

# -------- Starfield --------
STAR_COUNT = 100
STAR_MIN_SIZE = 1.0
STAR_MAX_SIZE = 3.0

# -------- Colors --------
BACKGROUND_COLOR = (0, 16, 51)          # #001033
STAR_COLOR = (255, 255, 0)              # #FFFF00
OBSTACLE_COLOR = (138, 43, 226)         # #8A2BE2
BRANCH_COLOR = (147, 112, 219)          # #9370DB
CHICK_BODY_COLOR = (255, 214, 10)
CHICK_BEAK_COLOR = (255, 140, 0)
CHICK_EYE_COLOR = (20, 20, 20)
TEXT_COLOR = (255, 255, 255)
MUTED_TEXT_COLOR = (209, 213, 219)
OVERLAY_COLOR = (0, 0, 0, 128)
ACCENT_COLOR = (250, 204, 21)

# -------- Device Detection --------
MOBILE_BREAKPOINT = 768                 # Window widths at or below count as touch-primary

WINDOW_TITLE = "Space Flappy Bird"
