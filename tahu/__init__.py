"""Front end of the Tahu language compiler: spans, lexer, operators and diagnostics."""

__version__ = "0.1.0"