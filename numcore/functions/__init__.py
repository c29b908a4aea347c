"""Low-level numerical kernels.

This subpackage contains the Numba-accelerated loops used by the flonum
vector engine and the primality sieve.
"""
