"""
Core numerical primitives and unit converters.

This package contains the foundational building blocks of the measurement
framework that are independent of unit definitions, dimension checking
and unit string parsing.
"""
