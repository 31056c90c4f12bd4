# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework
and the fixed tuning values of the physics model. The three user-facing
"universe constants" are NOT defined here; they arrive with every step as a
UniverseConstants value (see physics_engine.py).

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Screen dimensions (initial window size; the window is resizable)
WIDTH = 1200  # Pixels
HEIGHT = 800  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Window Title
TITLE = "Universe Constants Simulator"

# Visual Effects
TRAIL_EFFECT_COLOR = (0, 0, 0, 60) # RGBA. Alpha controls trail length (lower = longer).
PARTICLE_DRAW_RADIUS = 1.5  # Pixels

# --- Initialization ---
DEFAULT_PARTICLE_COUNT = 200
PARTICLE_MASS = 1.0
# Each initial velocity component is drawn from [-INITIAL_SPEED, +INITIAL_SPEED].
INITIAL_SPEED = 2.0  # Units per tick

# --- Baseline value of every universe constant (neutral / "real world") ---
BASELINE_CONSTANT = 1.0

# --- Physics model ---
COSMOLOGICAL_SCALE = 0.0001   # Velocity change per unit of offset from center, per tick.
GRAVITY_CONSTANT = 0.01
CLUMPING_STRENGTH = 0.05
INTERACTION_RANGE = 50.0      # Units. Pairs at or beyond this distance do not interact.
MIN_INTERACTION_DIST_SQ = 1.0 # Pairs closer than this (squared) are skipped.
# Fine structure values strictly above this flip pairwise attraction into repulsion.
REPULSION_THRESHOLD = 1.2
BOUNDS_DAMPING = -0.5         # Reverse velocity and lose half the speed.
