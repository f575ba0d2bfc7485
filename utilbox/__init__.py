"""Utilbox: small, independent utility modules.

Packages:
- core: Result/Error outcome type, combinators, validators, config
- dates: DateRange value type and calendar arithmetic
- enums: enum metadata registry and lookup helpers
- pagination: in-memory pagination with page metadata
- response: API response envelope models
- strings: casing, validation and manipulation helpers
"""

__version__ = "0.1.0"
