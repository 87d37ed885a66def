"""Root finding for polynomial roots."""

from quadrature_engine.rootfinding.newton import NewtonRaphsonSingleRootFinder

__all__ = ["NewtonRaphsonSingleRootFinder"]
