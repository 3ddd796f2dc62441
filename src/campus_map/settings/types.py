"""
Configuration type definitions for campus_map.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Configuration version stored under ``app/version``."""
    V1_0 = "1.0"
    CURRENT = V1_0


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=lambda: [])
    warnings: List[str] = field(default_factory=lambda: [])
