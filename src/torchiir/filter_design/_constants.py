"""Constants for filter design module."""

# Above this order, transfer-function (ba) coefficients of the designed
# filter are poorly conditioned in double precision
MAX_WELL_CONDITIONED_ORDER: int = 16

# Relative threshold below which elliptic sn values and pole imaginary
# parts are treated as zero
ELLIPTIC_EPSILON: float = 2e-16

# Terms kept in the nome series of the elliptic degree equation
ELLIPTIC_DEGREE_TERMS: int = 7

# Iteration cap for the descending Landen sequence
LANDEN_MAX_ITERATIONS: int = 10
