"""State-specific scanner mixins."""

from scriptlex.lexer.scanners.function import FunctionScannerMixin
from scriptlex.lexer.scanners.standard import StandardScannerMixin

__all__ = ["FunctionScannerMixin", "StandardScannerMixin"]
