"""code-convert -- convert a source file with a hosted LLM."""

__version__ = '0.1.0'
