# src/batchflow/core/item/__init__.py
"""
Contrato de itens do batchflow e colaboradores em memória.

- contract → protocolos ItemReader / ItemProcessor / ItemWriter,
             BaseItemWriter e PassThroughProcessor
- memory   → IterableItemReader e ListItemWriter
- logger   → LoggerWriter

Readers e writers específicos de formato não pertencem a este pacote.
"""

from .contract import BaseItemWriter, ItemProcessor, ItemReader, ItemWriter, PassThroughProcessor
from .logger import LoggerWriter
from .memory import IterableItemReader, ListItemWriter

__all__ = [
    "BaseItemWriter",
    "ItemProcessor",
    "ItemReader",
    "ItemWriter",
    "PassThroughProcessor",
    "LoggerWriter",
    "IterableItemReader",
    "ListItemWriter",
]
