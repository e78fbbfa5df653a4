"""
Core: integer-only fixed-point arithmetic engine and value types.

This module contains the foundational building blocks that are independent
of any host environment (dispatch, storage, caller identity).
"""
