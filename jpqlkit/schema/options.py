"""Rendering options for query builders.

Options are fixed when a top-level builder is created and inherited by
every sub-query builder it spawns::

    from jpqlkit import QueryBuilder, RenderOptions

    qb = QueryBuilder.start(options=RenderOptions(keyword_case="upper"))
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

KeywordCase = Literal["lower", "upper"]


class RenderOptions(BaseModel):
    """Controls how clause keywords are written.

    Attributes:
        keyword_case: ``"lower"`` (default) renders ``select ... from ...``;
            ``"upper"`` renders ``SELECT ... FROM ...``.  Caller fragments
            are never altered.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    keyword_case: KeywordCase = "lower"

    def keyword(self, word: str) -> str:
        """Return ``word`` in the configured case."""
        return word.upper() if self.keyword_case == "upper" else word.lower()


DEFAULT_OPTIONS = RenderOptions()
