# src/batchflow/core/item/memory.py
"""
Colaboradores em memória do contrato de itens.

- IterableItemReader: lê itens de qualquer iterável
- ListItemWriter: acumula os lotes escritos (sink em memória)

Não possuem formato de dados; servem para compor Jobs a partir de
estruturas Python e para inspecionar resultados em testes.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional, Sequence

from batchflow.core.exceptions import ItemReaderError

from .contract import BaseItemWriter


class IterableItemReader:
    """Reader sobre um iterável, com exaustão idempotente.

    Um `None` vindo da fonte não pode ser confundido com EndOfData e é
    reportado como erro de leitura.
    """

    def __init__(self, items: Iterable[Any]):
        self._iterator: Iterator[Any] = iter(items)
        self._exhausted = False
        self._position = 0

    def read(self) -> Optional[Any]:
        if self._exhausted:
            return None

        try:
            item = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return None

        self._position += 1
        if item is None:
            raise ItemReaderError(
                message="Item nulo na fonte de dados",
                details={"position": self._position},
            )
        return item


class ListItemWriter(BaseItemWriter):
    """Writer que registra cada lote recebido.

    Atributos:
        batches: lotes na ordem de escrita (cópias)
        opened / closed / flush_count: contadores de ciclo de vida
    """

    def __init__(self) -> None:
        self.batches: List[List[Any]] = []
        self.opened = 0
        self.closed = 0
        self.flush_count = 0

    @property
    def items(self) -> List[Any]:
        return [item for batch in self.batches for item in batch]

    def write(self, items: Sequence[Any]) -> None:
        self.batches.append(list(items))

    def flush(self) -> None:
        self.flush_count += 1

    def open(self) -> None:
        self.opened += 1

    def close(self) -> None:
        self.closed += 1
