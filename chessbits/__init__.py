"""Chess bitboards, attack tables, a KPK bitbase, utilities and benchmark command lists."""

__version__ = "0.1.0"
__all__ = ["attacks", "benchmark", "bitbase", "bitboard", "diagnostics", "misc"]