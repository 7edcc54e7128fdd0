"""Result objects for text operations run through the command line."""

import time
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class OperationResult:
    """Outcome of one named operation with its inputs and timing."""

    operation: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    value: Any = None
    processing_time_ms: float = 0.0
    timestamp: float = field(default_factory=time.time)

    def __post_init__(self) -> None:
        """Validate operation result."""
        if not self.operation:
            raise ValueError("Operation name cannot be empty")
        if self.processing_time_ms < 0:
            raise ValueError("processing_time_ms must be >= 0")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation,
            "arguments": dict(self.arguments),
            "value": self.value,
            "processing_time_ms": self.processing_time_ms,
        }
