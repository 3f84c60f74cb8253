"""Clause-level rendering.

Each :class:`ClauseSpec` names the accumulator list feeding a clause and
how that clause's fragments are joined.  Clauses
with no fragments are skipped entirely; the remaining ones are joined with a
single space in the order given.

Specs
-----
SELECT     ``select [distinct] a, b``
FROM       ``from Root r inner join r.x x``
WHERE      ``where a and b``
GROUP_BY   ``group by a, b``
HAVING     ``having a and b``
ORDER_BY   ``order by a, b``
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from jpqlkit.compile.accumulator import ClauseAccumulator
from jpqlkit.schema.options import RenderOptions


@dataclass(frozen=True)
class ClauseSpec:
    """Rendering rule for one clause.

    Attributes:
        field: Name of the :class:`ClauseAccumulator` list.
        keyword: Leading keyword, in lower case.
        separator: Literal text placed between fragments.  When
            ``keyword_separator`` is set it is a keyword and follows the
            configured keyword case.
        keyword_separator: Whether ``separator`` is a keyword.
    """

    field: str
    keyword: str
    separator: str
    keyword_separator: bool = False

    def render(
        self,
        fragments: Sequence[str],
        options: RenderOptions,
        distinct: bool = False,
    ) -> str:
        keyword = f"{self.keyword} distinct" if distinct else self.keyword
        if self.keyword_separator:
            separator = f" {options.keyword(self.separator)} "
        else:
            separator = self.separator
        return f"{options.keyword(keyword)} {separator.join(fragments)}"


SELECT = ClauseSpec("select", "select", ", ")
FROM = ClauseSpec("from_", "from", " ")
WHERE = ClauseSpec("where", "where", "and", keyword_separator=True)
GROUP_BY = ClauseSpec("group_by", "group by", ", ")
HAVING = ClauseSpec("having", "having", "and", keyword_separator=True)
ORDER_BY = ClauseSpec("order_by", "order by", ", ")

#: Clause order for a top-level query.
QUERY_CLAUSES: tuple[ClauseSpec, ...] = (SELECT, FROM, WHERE, GROUP_BY, HAVING, ORDER_BY)

#: Clause order for a sub-query.
SUBQUERY_CLAUSES: tuple[ClauseSpec, ...] = (SELECT, FROM, WHERE)


def render_clauses(
    acc: ClauseAccumulator,
    specs: Sequence[ClauseSpec],
    options: RenderOptions,
    distinct: bool = False,
) -> str:
    """Render the non-empty clauses of ``acc`` in ``specs`` order.

    Missing SELECT or FROM fragments are not reported; the resulting text is
    simply incomplete and will be rejected by whatever compiles it.
    """
    parts: list[str] = []
    for spec in specs:
        fragments = acc.fragments(spec.field)
        if not fragments:
            continue
        parts.append(spec.render(fragments, options, distinct=distinct and spec is SELECT))
    return " ".join(parts)
