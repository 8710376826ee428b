from . import (
    canon,
    exceptions,
    types,
    config,
    utils,
    validate,
    expand,
    timeline,
    normalize,
    wind,
    prescription,
    classify,
    grid,
    ingest,
    engine,
)

__all__ = [
    "canon",
    "exceptions",
    "types",
    "config",
    "utils",
    "validate",
    "expand",
    "timeline",
    "normalize",
    "wind",
    "prescription",
    "classify",
    "grid",
    "ingest",
    "engine",
]
