# lib/randgraph/errors.py
from __future__ import annotations


class RandomGraphError(Exception):
    """Base class for errors raised by randgraph."""


class InvalidParameter(RandomGraphError, ValueError):
    """A generation or configuration parameter is outside its allowed range."""


class DegenerateDistribution(RandomGraphError, ValueError):
    """A weighted draw was requested over weights with no positive mass."""
