"""
Constants declarations for orthodromic
"""

# Mean Earth Radius (spherical models)
MEAN_EARTH_RADIUS_KM = 6371.009

# Statute mile
KM_PER_MILE = 1.609344

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = WGS84_A * (1 - WGS84_F)

# Vincenty inverse iteration budget
VINCENTY_MAX_ITERATIONS = 100
VINCENTY_TOLERANCE = 1e-12

# Returned by the plain distance functions when a computation fails
FAILURE_SENTINEL = -1.0
