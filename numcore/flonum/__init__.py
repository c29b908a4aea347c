"""Flonum support: constants, ulp arithmetic, error measurement and vectors.

:class:`FlVector` is a fixed-length ``float64`` buffer with pointwise
operations; :func:`for_flvector` builds one from a loop.
"""

from numcore.flonum.build import build_flvector, flvector_map, for_flvector
from numcore.flonum.error import absolute_error, flulp_error, relative_error
from numcore.flonum.functions import (
    flnext,
    flonum_to_ordinal,
    flonums_between,
    flprev,
    flstep,
    flulp,
    ordinal_to_flonum,
)
from numcore.flonum.vector import (
    FlVector,
    flvector,
    flvector_abs,
    flvector_acos,
    flvector_add,
    flvector_asin,
    flvector_atan,
    flvector_ceiling,
    flvector_copy_range,
    flvector_cos,
    flvector_div,
    flvector_eq,
    flvector_exp,
    flvector_expt,
    flvector_floor,
    flvector_ge,
    flvector_gt,
    flvector_le,
    flvector_log,
    flvector_lt,
    flvector_max,
    flvector_min,
    flvector_mul,
    flvector_round,
    flvector_sin,
    flvector_sqr,
    flvector_sqrt,
    flvector_sub,
    flvector_sum,
    flvector_sums,
    flvector_tan,
    flvector_to_list,
    flvector_truncate,
    list_to_flvector,
    make_flvector,
)

__all__ = [
    "FlVector",
    "absolute_error",
    "build_flvector",
    "flnext",
    "flonum_to_ordinal",
    "flonums_between",
    "flprev",
    "flstep",
    "flulp",
    "flulp_error",
    "flvector",
    "flvector_abs",
    "flvector_acos",
    "flvector_add",
    "flvector_asin",
    "flvector_atan",
    "flvector_ceiling",
    "flvector_copy_range",
    "flvector_cos",
    "flvector_div",
    "flvector_eq",
    "flvector_exp",
    "flvector_expt",
    "flvector_floor",
    "flvector_ge",
    "flvector_gt",
    "flvector_le",
    "flvector_log",
    "flvector_lt",
    "flvector_map",
    "flvector_max",
    "flvector_min",
    "flvector_mul",
    "flvector_round",
    "flvector_sin",
    "flvector_sqr",
    "flvector_sqrt",
    "flvector_sub",
    "flvector_sum",
    "flvector_sums",
    "flvector_tan",
    "flvector_to_list",
    "flvector_truncate",
    "for_flvector",
    "list_to_flvector",
    "make_flvector",
    "ordinal_to_flonum",
    "relative_error",
]
