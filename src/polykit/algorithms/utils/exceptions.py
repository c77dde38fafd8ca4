"""
Custom exceptions for the algorithms package.
"""

class PolykitError(Exception):
    """Base exception for polykit errors.
    
    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class UnsupportedOperationError(PolykitError):
    """Raised when a univariate-only operation is applied to a
    multivariate polynomial.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str = "only defined for univariate polynomials"):
        super().__init__(message)


class UnknownVariableError(PolykitError):
    """Raised when an operation needs a variable the polynomial does not have.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class InvalidNameError(PolykitError):
    """Raised when a variable name or identifier cannot be encoded or decoded.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class IdOverflowError(PolykitError):
    """Raised when a variable name or index exceeds the representable range.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class UnmappedVariableError(PolykitError):
    """Raised when sin/cos is taken of a variable without a sin/cos mapping.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class UnsupportedDegreeError(PolykitError):
    """Raised when sin/cos is taken of a polynomial of degree greater than one.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class UnsupportedCoefficientError(PolykitError):
    """Raised when a trigonometric argument has a non-integer linear coefficient.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class InvalidDegreeError(PolykitError):
    """Raised when an angle, sine or cosine polynomial is not a simple variable.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ConvergenceError(PolykitError):
    """Raised when an algorithm fails to converge.
    
    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)
