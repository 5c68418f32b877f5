"""
zengin-lint core library.

This package contains the core functionality:
- parser: line splitting, field tokenizing, record classification
- rules: record validators, structural checks and the validation pipeline
- files: reading and decoding files for the engine
"""

__all__: list[str] = []
