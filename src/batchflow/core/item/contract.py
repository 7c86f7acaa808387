# src/batchflow/core/item/contract.py
"""
Contrato de itens do batchflow (Reader, Processor, Writer).

Qualquer fonte ou destino de dados concreto (arquivos delimitados, XML,
bancos relacionais, ...) participa de um Step orientado a chunks
satisfazendo três capacidades independentes:

    - ItemReader.read()          → produz um item por chamada
    - ItemProcessor.process(x)   → transforma um item
    - ItemWriter.write(items)    → persiste um lote de itens

Convenções do contrato:
    - `read()` retorna `None` para sinalizar fim dos dados (EndOfData).
      Após o primeiro `None`, toda chamada subsequente também retorna `None`.
      Consequentemente, itens nunca são `None`.
    - Falhas são sinalizadas levantando exceção. O engine contabiliza
      qualquer exceção como erro da fase correspondente; exceções fora da
      hierarquia `ItemReaderError`/`ItemProcessorError`/`ItemWriterError`
      são encapsuladas na classe da fase.
    - `open()`/`close()` são chamados exatamente uma vez por execução do
      Step; falhas nesses hooks nunca abortam o Step.
    - O engine nunca faz chamadas sobrepostas ao mesmo colaborador.

A conformidade é verificada por duck typing (`@runtime_checkable`);
herança não é necessária.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Protocol, Sequence, TypeVar, runtime_checkable


T = TypeVar("T")


@runtime_checkable
class ItemReader(Protocol):
    def read(self) -> Optional[Any]:
        """Retorna o próximo item, ou `None` quando não há mais itens."""
        ...


@runtime_checkable
class ItemProcessor(Protocol):
    def process(self, item: Any) -> Any:
        """Transforma um item; falhas descartam o item do lote de saída."""
        ...


@runtime_checkable
class ItemWriter(Protocol):
    def write(self, items: Sequence[Any]) -> None:
        ...

    def flush(self) -> None:
        ...

    def open(self) -> None:
        ...

    def close(self) -> None:
        ...


class BaseItemWriter:
    """Writer com hooks de ciclo de vida vazios; subclasses implementam `write`."""

    def write(self, items: Sequence[Any]) -> None:
        raise NotImplementedError

    def flush(self) -> None:
        return None

    def open(self) -> None:
        return None

    def close(self) -> None:
        return None


class PassThroughProcessor(Generic[T]):
    """Processor identidade, usado quando nenhum processor é informado ao Step."""

    def process(self, item: T) -> T:
        return item
