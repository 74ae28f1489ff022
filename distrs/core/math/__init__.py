"""
Core math modules для distrs

Математические примитивы и аппроксимации специальных функций.
"""

# Numerical Safeguards
from distrs.core.math.numerical_safeguards import (
    # Constants
    INF,
    NAN,
    NEG_INF,
    # NaN/Inf detection
    any_nan,
    is_whole_number,
    # Arithmetic
    horner,
    ieee_divide,
    split_sign,
    # Coercion
    to_float,
)

# Error Function (Winitzki 2008)
from distrs.core.math.erf import ERF_A, INVERSE_ERF_A, erf, inverse_erf

# Gamma Function (Lanczos)
from distrs.core.math.gamma import (
    GAMMA_OVERFLOW_THRESHOLD,
    LANCZOS_BASE_TERM,
    LANCZOS_COEFFICIENTS,
    gamma,
    is_pole,
)

# HostMath backends
from distrs.core.math.host_math import (
    HostMath,
    NativeHostMath,
    PortableHostMath,
    resolve_host_math,
)

__all__ = [
    # Numerical Safeguards — Constants
    "INF",
    "NAN",
    "NEG_INF",
    # Numerical Safeguards — NaN/Inf detection
    "any_nan",
    "is_whole_number",
    # Numerical Safeguards — Arithmetic
    "horner",
    "ieee_divide",
    "split_sign",
    # Numerical Safeguards — Coercion
    "to_float",
    # Error Function
    "ERF_A",
    "INVERSE_ERF_A",
    "erf",
    "inverse_erf",
    # Gamma Function
    "GAMMA_OVERFLOW_THRESHOLD",
    "LANCZOS_BASE_TERM",
    "LANCZOS_COEFFICIENTS",
    "gamma",
    "is_pole",
    # HostMath
    "HostMath",
    "NativeHostMath",
    "PortableHostMath",
    "resolve_host_math",
]
