"""
Special functions needed by the step samplers.
"""

import math

# Lanczos approximation, g = 7, nine coefficients
_LANCZOS_G = 7
_LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)


def gamma(z: float) -> float:
    """
    Gamma function via the Lanczos approximation.

    Arguments below 0.5 go through the reflection formula
    ``Γ(z)Γ(1-z) = π / sin(πz)``. The pole at zero returns ``inf``.
    """
    if z < 0.5:
        if z == 0:
            return math.inf
        return math.pi / (math.sin(math.pi * z) * gamma(1.0 - z))

    z -= 1.0
    x = _LANCZOS_COEFFICIENTS[0]
    for i in range(1, _LANCZOS_G + 2):
        x += _LANCZOS_COEFFICIENTS[i] / (z + i)
    t = z + _LANCZOS_G + 0.5
    return math.sqrt(2.0 * math.pi) * t ** (z + 0.5) * math.exp(-t) * x
