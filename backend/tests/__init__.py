"""
Test infrastructure for the candidate matching engine.

This module provides:
- Test data builders and a BC Interior location table
- Common assertion helpers
"""

from .fixtures import *
from .utils import *

__all__ = [
    "AS_OF",
    "create_test_talent",
    "create_test_project",
    "create_test_talent_payload",
    "create_test_project_payload",
    "create_test_resolver",
    "create_test_taxonomy",
    "TestHelper"
]
