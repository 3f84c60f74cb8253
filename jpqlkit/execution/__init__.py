"""jpqlkit execution boundary: handle protocols and parameter binding.

The SQLAlchemy handle lives in :mod:`jpqlkit.execution.sqlalchemy` and is
not imported here so SQLAlchemy stays optional.
"""
from jpqlkit.execution.base import CompiledQuery, ExecutionHandle
from jpqlkit.execution.binding import bind_parameters, compile_and_bind, compile_query

__all__ = [
    "CompiledQuery",
    "ExecutionHandle",
    "bind_parameters",
    "compile_and_bind",
    "compile_query",
]
