# src/batchflow/steps/__init__.py
"""
Steps concretos do batchflow.

- chunk_oriented → ChunkOrientedStep (loop de chunks com política de skip)
- tasklet        → TaskletStep e o protocolo Tasklet
"""

from .chunk_oriented import ChunkOrientedStep
from .tasklet import Tasklet, TaskletStep

__all__ = ["ChunkOrientedStep", "Tasklet", "TaskletStep"]
