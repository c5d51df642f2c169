"""Guard detection: which risky operations are protected by enclosing checks."""

from guardlint.guards.extract import extract
from guardlint.guards.facts import (
    NO_FACTS,
    BranchFacts,
    Fact,
    Guarantee,
    IndexBound,
    LengthAlias,
    MinLength,
    NonZero,
)
from guardlint.guards.normalize import (
    NormalizedKey,
    is_constant_shape,
    is_nonzero_literal,
    is_zero_literal,
    length_receiver,
    literal_value,
    normalize,
    peel,
    range_start,
)
from guardlint.guards.query import is_division_guarded, is_index_guarded, is_length_derived
from guardlint.guards.scope import GuardScope
from guardlint.guards.walker import GuardedWalker

__all__ = [
    "NO_FACTS",
    "BranchFacts",
    "Fact",
    "Guarantee",
    "GuardScope",
    "GuardedWalker",
    "IndexBound",
    "LengthAlias",
    "MinLength",
    "NonZero",
    "NormalizedKey",
    "extract",
    "is_constant_shape",
    "is_division_guarded",
    "is_index_guarded",
    "is_length_derived",
    "is_nonzero_literal",
    "is_zero_literal",
    "length_receiver",
    "literal_value",
    "normalize",
    "peel",
    "range_start",
]
