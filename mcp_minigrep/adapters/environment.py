"""
Environment Adapters

Implement EnvironmentLookup against the process environment or a plain mapping.
"""
import os
from typing import Mapping

from ..core.ports import EnvironmentLookup


class OsEnvironment(EnvironmentLookup):
    """Presence check against os.environ"""

    def is_set(self, name: str) -> bool:
        return name in os.environ


class MappingEnvironment(EnvironmentLookup):
    """Presence check against a fixed mapping (tests, embedding)"""

    def __init__(self, mapping: Mapping[str, str] | None = None):
        self.mapping = dict(mapping or {})

    def is_set(self, name: str) -> bool:
        return name in self.mapping
