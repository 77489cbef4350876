"""
Core module containing foundational components for the candidate matching engine.

This module provides:
- Exception handling
- Shared score arithmetic
"""
