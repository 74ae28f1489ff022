"""
Core mathematical primitives, configuration and domain models.

This module contains the building blocks the distributions are made of;
it has no dependency on distrs.distributions.
"""
