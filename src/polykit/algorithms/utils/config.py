# Numba
FASTMATH = False  # Global flag for Numba's fastmath option

# Algorithm parameters
TOL = 1e-10  # default tolerance of Polynomial.is_approx

# Precision control
USE_ARBITRARY_PRECISION = False  # Set to True to find roots with mpmath
MPMATH_DPS = 50  # Decimal places for mpmath (default 50, standard float64 ≈ 15-17)
MPMATH_MAXSTEPS = 200  # Iteration cap for mpmath.polyroots
NUMPY_DTYPE_REAL = "float64"  # "float32" or "float64"
NUMPY_DTYPE_COMPLEX = "complex128"  # "complex64" or "complex128"
