"""
counting_components: components of surgered multicurves

Given a two-sided curve δ and a curve γ on a (possibly non-orientable)
surface, encoded by the signed permutation of their k intersections, this
package resolves m parallel copies of δ against n parallel copies of γ
by surgery and counts the components of the result, split into one-sided
and two-sided curves.

QUICK START:
    from counting_components import (
        SignedPermutation,
        count_components_with_orientability,
        count_components_upto_complexity,
    )

    perm = SignedPermutation((1, 2, 0), frozenset({1}))
    count_components_with_orientability(perm, 2, 3)   # (two_sided, one_sided)
    count_components_upto_complexity(perm, 10)        # every coprime (m, n)

PIPELINE:
1. SignedPermutation - the intersection pattern
2. StrandSpace - dense addresses for the n + k*m strands of one (m, n)
3. SurgeryTransition - the "always turn left" next-strand map
4. ComponentTracer - cycles of the map, classified by flip parity
5. ComplexityEnumerator - all coprime (m, n) in parallel
"""

from .errors import (
    CountingComponentsError,
    InvalidEncoding,
    OutOfRangeStrand,
    InconsistentTransition,
)
from .permutation import SignedPermutation
from .strand import Strand, Transverse, PermutationDirection, StrandSpace
from .transition import SurgeryTransition, get_next_major_strand
from .tracer import (
    Component,
    ComponentTracer,
    Sidedness,
    count_components_with_orientability,
    has_one_component,
    single_component_sidedness,
)
from .numeric import coprime_pairs
from .enumerator import (
    ComplexityEnumerator,
    EnumerationResult,
    count_components_upto_complexity,
    two_sided_multicurves_upto_complexity,
)

__version__ = "0.1.0"
__all__ = [
    # Errors
    "CountingComponentsError",
    "InvalidEncoding",
    "OutOfRangeStrand",
    "InconsistentTransition",
    # Core data structures
    "SignedPermutation",
    "Strand",
    "Transverse",
    "PermutationDirection",
    "StrandSpace",
    # Surgery
    "SurgeryTransition",
    "get_next_major_strand",
    # Tracing
    "Component",
    "ComponentTracer",
    "Sidedness",
    "count_components_with_orientability",
    "has_one_component",
    "single_component_sidedness",
    # Enumeration
    "coprime_pairs",
    "ComplexityEnumerator",
    "EnumerationResult",
    "count_components_upto_complexity",
    "two_sided_multicurves_upto_complexity",
]
