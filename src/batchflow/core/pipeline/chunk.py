# src/batchflow/core/pipeline/chunk.py
"""Buffer limitado e ordenado de itens lidos, com status transitório."""

from __future__ import annotations

from typing import Any, List

from .types import ChunkStatus


class Chunk:
    """
    Lote de até `chunk_size` itens carregado pelas fases de processamento e escrita.

    Transições de status:
        - add(item)   → CONTINUABLE, ou FULL ao atingir `chunk_size`
        - mark_error  → ERROR (o próximo `add` volta a CONTINUABLE/FULL)
        - finish()    → FINISHED (o buffer pode estar vazio ou parcial)
    """

    def __init__(self, chunk_size: int):
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        self.chunk_size = chunk_size
        self.items: List[Any] = []
        self.status = ChunkStatus.CONTINUABLE

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_full(self) -> bool:
        return self.status == ChunkStatus.FULL

    @property
    def is_finished(self) -> bool:
        return self.status == ChunkStatus.FINISHED

    @property
    def accepts_items(self) -> bool:
        return self.status in (ChunkStatus.CONTINUABLE, ChunkStatus.ERROR)

    def add(self, item: Any) -> None:
        if not self.accepts_items:
            raise ValueError(f"chunk does not accept items in status {self.status.value}")
        self.items.append(item)
        self.status = ChunkStatus.FULL if len(self.items) >= self.chunk_size else ChunkStatus.CONTINUABLE

    def mark_error(self) -> None:
        self.status = ChunkStatus.ERROR

    def finish(self) -> None:
        self.status = ChunkStatus.FINISHED
