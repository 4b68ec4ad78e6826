"""
go-dataclass: generate read-only Go accessor interfaces.

Given an interface name and a ``Name type`` field list, emits the
interface, an unexported backing struct, accessors and a constructor.
"""

from .codegen import (
    DataclassGenerator,
    GeneratorConfig,
    GeneratorError,
    GenerationResult,
    generate_code,
    generate_dataclass,
    load_config,
)

__version__ = "0.1.0"

__all__ = [
    "DataclassGenerator",
    "GeneratorConfig",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    "generate_dataclass",
    "load_config",
    "__version__",
]
