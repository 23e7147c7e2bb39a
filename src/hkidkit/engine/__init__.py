"""Engine composition and batch orchestration.

Main Components
---------------
- IdentifierEngine: configured facade over the four identifier operations
- EngineConfig: engine configuration
- run_batch / BatchConfig / BatchResult: file-level validation runs
"""

from hkidkit.engine.config import BatchConfig, BatchResult, EngineConfig
from hkidkit.engine.engine import IdentifierEngine
from hkidkit.engine.runner import run_batch

__all__ = [
    "BatchConfig",
    "BatchResult",
    "EngineConfig",
    "IdentifierEngine",
    "run_batch",
]
