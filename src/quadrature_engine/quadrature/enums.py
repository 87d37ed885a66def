from enum import Enum


class QuadratureFamily(str, Enum):
    LEGENDRE = "legendre"
    LAGUERRE = "laguerre"
    HERMITE = "hermite"
    JACOBI = "jacobi"
