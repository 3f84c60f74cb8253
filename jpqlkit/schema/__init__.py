"""jpqlkit value types: parameters and rendering options."""
from jpqlkit.schema.options import DEFAULT_OPTIONS, RenderOptions
from jpqlkit.schema.parameters import ParameterEntry, ParameterStore, TemporalType

__all__ = [
    "DEFAULT_OPTIONS",
    "ParameterEntry",
    "ParameterStore",
    "RenderOptions",
    "TemporalType",
]
