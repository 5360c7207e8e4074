"""Shared application constants.

Centralizes values used across the routers, services and client so we can
document and adjust them in one place.
"""

# Prefix for every JSON route; anything else falls through to the SPA
API_PREFIX = "/api"

# Default for BikeEvent.type when the client leaves it out
DEFAULT_BIKE_EVENT_TYPE = "race"

# Defaults for a freshly added exercise row
DEFAULT_SETS = 1
DEFAULT_REPS = 1
DEFAULT_WEIGHT = 0.0
