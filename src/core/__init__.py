"""
Core word math, domain value types, and contracts.

This module contains the foundational 256-bit word primitives that are
independent of their consumers (VM execution, storage, RPC encoding).
"""
