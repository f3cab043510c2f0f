"""Elliptic functions for filter design.

This module computes the zeros, poles and gain of the elliptic analog
lowpass prototype with the classic ``ellipap`` construction: the degree
equation is solved with nomes and the inverse Jacobian ``sc`` function is
evaluated through the descending Landen transformation.
"""

from __future__ import annotations

import cmath
import math
from typing import Tuple

import numpy as np
from scipy import special

from ._constants import (
    ELLIPTIC_DEGREE_TERMS,
    ELLIPTIC_EPSILON,
    LANDEN_MAX_ITERATIONS,
)
from ._exceptions import SpecificationError


def _pow10m1(x: float) -> float:
    """Compute 10^x - 1 accurately for small x."""
    return math.expm1(x * math.log(10.0))


def _ellipdeg(n: int, m1: float) -> float:
    """Solve degree equation using nomes.

    Given n, m1, solve:
        n * K(m) / K'(m) = K(m1) / K'(m1)
    for m.
    """
    K1 = special.ellipk(m1)
    K1p = special.ellipkm1(m1)

    q1 = np.exp(-np.pi * K1p / K1)
    q = q1 ** (1.0 / n)

    mnum = np.arange(ELLIPTIC_DEGREE_TERMS + 1)
    mden = np.arange(1, ELLIPTIC_DEGREE_TERMS + 2)

    num = np.sum(q ** (mnum * (mnum + 1)))
    den = 1 + 2 * np.sum(q ** (mden**2))

    return float(16 * q * (num / den) ** 4)


def _complement(kx: complex) -> complex:
    return cmath.sqrt((1 - kx) * (1 + kx))


def _arc_jac_sn(w: complex, m: float) -> complex:
    """Complex inverse Jacobian sn function.

    Solve for z in w = sn(z, m) using the descending Landen
    transformation of the modulus k = sqrt(m).
    """
    k = math.sqrt(m)

    if k > 1:
        raise SpecificationError(f"Elliptic modulus must be <= 1, got {k}")
    if k == 1:
        return cmath.atanh(w)

    ks = [k]
    niter = 0
    while ks[-1] != 0:
        k_ = ks[-1]
        k_p = _complement(k_).real
        ks.append((1 - k_p) / (1 + k_p))
        niter += 1
        if niter > LANDEN_MAX_ITERATIONS:
            raise SpecificationError("Landen transformation not converging")

    K = math.prod(1 + kn for kn in ks[1:]) * math.pi / 2

    wn = complex(w)
    for kn, knext in zip(ks[:-1], ks[1:]):
        wn = 2 * wn / ((1 + knext) * (1 + _complement(kn * wn)))

    u = 2 / math.pi * cmath.asin(wn)
    return K * u


def _arc_jac_sc1(w: float, m: float) -> float:
    """Real inverse Jacobian sc, with complementary modulus.

    Solve for z in w = sc(z, 1-m). From sc(z, m) = -i * sn(i * z, 1 - m),
    z = -i * asn(i * w, m).
    """
    zcomplex = _arc_jac_sn(1j * w, m)
    if abs(zcomplex.real) > 1e-14:
        raise SpecificationError(
            "Inverse Jacobian sc did not return a real value"
        )
    return zcomplex.imag


def elliptic_zpk(
    n: int,
    rp: float,
    rs: float,
) -> Tuple[np.ndarray, np.ndarray, float]:
    """Compute zeros, poles, and gain for elliptic analog lowpass prototype.

    Parameters
    ----------
    n : int
        Filter order (must be positive).
    rp : float
        Passband ripple in dB (must be positive).
    rs : float
        Stopband attenuation in dB (must exceed rp).

    Returns
    -------
    zeros : ndarray of complex
        Filter zeros on imaginary axis.
    poles : ndarray of complex
        Filter poles in left half-plane.
    gain : float
        System gain.
    """
    if n == 1:
        p = -math.sqrt(1.0 / _pow10m1(0.1 * rp))
        return (
            np.zeros(0, dtype=np.complex128),
            np.array([complex(p, 0.0)]),
            -p,
        )

    eps_sq = _pow10m1(0.1 * rp)
    eps = math.sqrt(eps_sq)

    ck1_sq = eps_sq / _pow10m1(0.1 * rs)
    if ck1_sq == 0:
        raise SpecificationError(
            "Cannot design a filter with given rp and rs specifications"
        )

    K1 = float(special.ellipk(ck1_sq))

    m = _ellipdeg(n, ck1_sq)
    capk = float(special.ellipk(m))

    # j = [1, 3, 5, ...] for even n, [0, 2, 4, ...] for odd n
    j = np.arange(1 - n % 2, n, 2)
    s, c, d, _ = special.ellipj(j * capk / n, m * np.ones(len(j)))

    snew = s[np.abs(s) > ELLIPTIC_EPSILON]
    zeros = 1j / (math.sqrt(m) * snew)
    zeros = np.concatenate((zeros, np.conjugate(zeros)))

    r = _arc_jac_sc1(1.0 / eps, ck1_sq)
    v0 = capk * r / (n * K1)

    sv, cv, dv, _ = special.ellipj(v0, 1 - m)
    poles = -(c * d * sv * cv + 1j * s * dv) / (1 - (d * sv) ** 2.0)

    if n % 2:
        # The real pole is not mirrored
        scale = ELLIPTIC_EPSILON * np.sqrt(np.sum(poles * np.conjugate(poles)).real)
        mirrored = poles[np.abs(poles.imag) > scale]
        poles = np.concatenate((poles, np.conjugate(mirrored)))
    else:
        poles = np.concatenate((poles, np.conjugate(poles)))

    gain = float((np.prod(-poles) / np.prod(-zeros)).real)
    if n % 2 == 0:
        gain = gain / math.sqrt(1 + eps_sq)

    return zeros, poles, gain
