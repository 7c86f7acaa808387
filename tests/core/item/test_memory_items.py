# tests/core/item/test_memory_items.py
"""
Testes dos colaboradores em memória e do LoggerWriter.

Os testes asseguram que:
- IterableItemReader sinaliza fim dos dados com None de forma idempotente
- um None vindo da fonte é reportado como ItemReaderError
- ListItemWriter registra lotes e hooks de ciclo de vida
- PassThroughProcessor devolve o próprio item
- LoggerWriter emite um registro de log por item
- os colaboradores satisfazem os protocolos de itens
"""

import pytest
from loguru import logger

try:
    from batchflow.core.exceptions import ItemReaderError
    from batchflow.core.item.contract import (
        BaseItemWriter,
        ItemProcessor,
        ItemReader,
        ItemWriter,
        PassThroughProcessor,
    )
    from batchflow.core.item.logger import LoggerWriter
    from batchflow.core.item.memory import IterableItemReader, ListItemWriter
except Exception as e:  # noqa: BLE001
    IterableItemReader = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"""Missing item modules. Implement:
- src/batchflow/core/item/contract.py
- src/batchflow/core/item/memory.py
- src/batchflow/core/item/logger.py
Import error: {_IMPORT_ERR}
""")


def test_reader_end_of_data_is_idempotent():
    _require_imports()
    reader = IterableItemReader(iter([1, 2]))

    assert [reader.read(), reader.read()] == [1, 2]
    assert reader.read() is None
    assert reader.read() is None


def test_reader_rejects_none_items():
    _require_imports()
    reader = IterableItemReader(["a", None, "b"])

    assert reader.read() == "a"
    with pytest.raises(ItemReaderError) as excinfo:
        reader.read()
    assert excinfo.value.details["position"] == 2
    assert reader.read() == "b"


def test_list_writer_records_batches_and_lifecycle():
    _require_imports()
    writer = ListItemWriter()
    writer.open()
    writer.write((1, 2))
    writer.flush()
    writer.write([3])
    writer.close()

    assert writer.batches == [[1, 2], [3]]
    assert writer.items == [1, 2, 3]
    assert (writer.opened, writer.flush_count, writer.closed) == (1, 1, 1)


def test_base_writer_requires_write():
    _require_imports()
    with pytest.raises(NotImplementedError):
        BaseItemWriter().write([1])


def test_collaborators_satisfy_protocols():
    _require_imports()
    assert isinstance(IterableItemReader([]), ItemReader)
    assert isinstance(PassThroughProcessor(), ItemProcessor)
    assert isinstance(ListItemWriter(), ItemWriter)
    assert isinstance(LoggerWriter(), ItemWriter)


def test_pass_through_processor_returns_same_object():
    _require_imports()
    item = {"name": "Ana"}
    assert PassThroughProcessor().process(item) is item


def test_logger_writer_logs_each_item():
    _require_imports()
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    try:
        LoggerWriter(level="debug").write([{"id": 1}, {"id": 2}])
    finally:
        logger.remove(handler_id)

    lines = [str(m).strip() for m in messages]
    assert lines == ["DEBUG|Record: {'id': 1}", "DEBUG|Record: {'id': 2}"]
