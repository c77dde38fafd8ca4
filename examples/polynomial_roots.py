"""Example script: building univariate polynomials, differentiating them and
locating their roots with both root finders.

Run with
    python examples/polynomial_roots.py
"""

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from polykit import Polynomial
from polykit.utils.log_config import logger


def main() -> None:
    x = Polynomial("x")
    p = (x - 1) * (x + 2) * (x - 0.5) + 0.1 * x**4

    logger.info("p(x) = %s", p)
    logger.info("p'(x) = %s", p.derivative())
    logger.info("coefficients: %s", p.get_coefficients())

    for high_precision in (False, True):
        roots = p.roots(high_precision=high_precision)
        label = "mpmath" if high_precision else "companion matrix"
        logger.info("roots (%s): %s", label, roots)
        logger.info("max |p(root)|: %.3e", max(abs(p(complex(r))) for r in roots))

    # stationary points
    logger.info("critical points: %s", p.derivative().roots())


if __name__ == "__main__":
    main()
