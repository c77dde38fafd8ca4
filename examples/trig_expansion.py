"""Example script: expanding sines and cosines of angle sums into polynomials
of per-angle sine/cosine variables, as done for the kinematics of a planar
two-link arm.

Run with
    python examples/trig_expansion.py
"""

import math
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from polykit import Polynomial, TrigPoly, cos, sin, variable_name_to_id
from polykit.utils.log_config import logger

L1, L2 = 1.0, 0.6


def main() -> None:
    q1 = TrigPoly.from_angle(Polynomial("q", 1), Polynomial("s", 1), Polynomial("c", 1))
    q2 = TrigPoly.from_angle(Polynomial("q", 2), Polynomial("s", 2), Polynomial("c", 2))

    # end effector position
    px = L1 * cos(q1) + L2 * cos(q1 + q2)
    py = L1 * sin(q1) + L2 * sin(q1 + q2)
    logger.info("x = %s", px)
    logger.info("y = %s", py)

    angles = {variable_name_to_id("q", 1): 0.4, variable_name_to_id("q", 2): -1.1}
    logger.info("x(q) = %.6f (direct: %.6f)", px.evaluate(angles),
                L1 * math.cos(0.4) + L2 * math.cos(0.4 - 1.1))
    logger.info("y(q) = %.6f (direct: %.6f)", py.evaluate(angles),
                L1 * math.sin(0.4) + L2 * math.sin(0.4 - 1.1))


if __name__ == "__main__":
    main()
