from .handle import DatabaseHandle
from .schema import ensure_schema, initialize

__all__ = [
    "DatabaseHandle",
    "ensure_schema",
    "initialize",
]
