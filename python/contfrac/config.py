# ContFrac SDK - Configuration
# Copyright (c) 2024 ContFrac Contributors. All rights reserved.

"""Configuration settings for ContFrac."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np


class OverflowMode(Enum):
    """
    What happens when fixed-width arithmetic leaves the integer domain.

    CHECKED raises IntegerOverflowError; WRAPPING wraps two's-complement
    style, the way release builds of fixed-width integer code behave.
    """
    CHECKED = "checked"
    WRAPPING = "wrapping"


@dataclass(frozen=True)
class Config:
    """
    Configuration for continued fraction computations.

    Attributes:
        int_type: numpy signed integer dtype name that bounds every
                  intermediate value ("int8", "int16", "int32" or "int64").
        overflow: Overflow behaviour outside the domain.
    """
    int_type: str = "int32"
    overflow: OverflowMode = OverflowMode.CHECKED

    def __post_init__(self):
        # Accept strings and numpy dtypes for convenience
        try:
            dtype = np.dtype(self.int_type)
        except TypeError as e:
            raise ValueError(f"Unknown integer type: {self.int_type!r}") from e
        if dtype.kind != 'i':
            raise ValueError(
                f"int_type must be a signed integer dtype, got {dtype.name}"
            )
        object.__setattr__(self, 'int_type', dtype.name)

        if not isinstance(self.overflow, OverflowMode):
            object.__setattr__(self, 'overflow', OverflowMode(self.overflow))

    @classmethod
    def i32(cls) -> Config:
        """32-bit checked configuration (default)."""
        return cls()

    @classmethod
    def i64(cls) -> Config:
        """64-bit checked configuration."""
        return cls(int_type="int64")

    @classmethod
    def wrapping(cls, int_type: str = "int32") -> Config:
        """Wraparound arithmetic, matching unchecked fixed-width code."""
        return cls(int_type=int_type, overflow=OverflowMode.WRAPPING)

    @property
    def bits(self) -> int:
        return int(np.iinfo(self.int_type).bits)

    @property
    def min_value(self) -> int:
        return int(np.iinfo(self.int_type).min)

    @property
    def max_value(self) -> int:
        return int(np.iinfo(self.int_type).max)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            'intType': self.int_type,
            'overflow': self.overflow.value,
        }

    def __repr__(self) -> str:
        return f"Config(int_type={self.int_type!r}, overflow={self.overflow.value!r})"


DEFAULT_CONFIG = Config()
