"""
Constants declarations for geolines
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Mean Earth Radius (approximate for Haversine)
EARTH_RADIUS_METERS = 6_371_000.0

# International nautical mile; meridional parts are expressed in these
NAUTICAL_MILE = 1852.0

# Vincenty iteration bounds
MAX_INVERSE_ITERATIONS = 100
MAX_DIRECT_ITERATIONS = 10_000

# Radians. Successive iterates closer than this are considered converged
CONVERGENCE_TOLERANCE = 5e-11

# Radians. Coincidence/equator test once the inverse iteration has given up
NON_CONVERGENCE_TOLERANCE = 1e-10

# cos(latitude) below this is treated as starting from a pole
POLE_TOLERANCE = 5e-11

# Radians of latitude; below this rhumb lines use the parallel sailing expansion
PARALLEL_SAILING_THRESHOLD = 0.0008
