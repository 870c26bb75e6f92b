"""
Shared defaults for routing, directions and positioning.

Every value here can be overridden per call through the keyword argument of
the same meaning.
"""

# Floor-plan scale: canvas units (pixels) per meter
DEFAULT_PIXELS_PER_METER = 50.0

# Average walking speed used for time estimates (m/s)
WALKING_SPEED_M_S = 1.2

# Log-distance path-loss defaults for BLE-class beacons
DEFAULT_REFERENCE_POWER_DBM = -59.0  # RSS at 1 m
DEFAULT_PATH_LOSS_EXPONENT = 2.0  # free space

# Distance floor for invalid readings and inverse-distance weights (m)
MIN_DISTANCE_M = 0.1

# Upper bound on any reported position accuracy radius (m)
MAX_ACCURACY_M = 20.0

# Upper bound on ranges from the path-loss model (m); keeps squared ranges finite
MAX_RANGE_M = 1.0e4
