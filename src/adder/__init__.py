"""ADDER: fixed-point addition subroutine"""

from src.adder.adder import (
    Adder,
    AdderConfig,
    AdderResult,
    OverflowPolicy,
    add,
)
from src.adder.linkage import CONTRACT_SCHEMA_VERSION, AdderLinkage

__all__ = [
    "Adder",
    "AdderConfig",
    "AdderResult",
    "AdderLinkage",
    "OverflowPolicy",
    "CONTRACT_SCHEMA_VERSION",
    "add",
]
