"""Utilities for expression trees."""

from .sympy_utils import TruncatedDiv, binary_to_sympy, latex_representation

__all__ = ['TruncatedDiv', 'binary_to_sympy', 'latex_representation']
