"""
Bakery Kernel

Pure inventory and lifecycle domain for a single-vendor bakery:
- Goods with live-bound prices
- Monotonic sold/consumed lifecycle state
- Decimal prices rounded to cents
- Typed, coded exceptions and structured JSON logging
"""

__version__ = "0.1.0"
