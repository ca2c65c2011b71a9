"""Reversible per-representation normalization.

This package holds the normalization capability, its built-in
implementations, and the chain that applies one per representation.
"""
