"""jpqlkit building layer: fragments → query text."""
from jpqlkit.compile.builder import QueryBuilder, SubQueryBuilder
from jpqlkit.compile.composer import compose, conjunction, disjunction

__all__ = [
    "QueryBuilder",
    "SubQueryBuilder",
    "compose",
    "conjunction",
    "disjunction",
]
