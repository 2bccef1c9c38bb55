"""
PROPERTY REPOSITORY INTERFACE
=============================

Contrato de leitura usado pelo serviço de busca.
A implementação concreta (SQLAlchemy) traduz o predicado para SQL.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

from imoveis.domain.entities import Property
from imoveis.services.search_params import SearchPredicate


DISTINCT_FIELDS = ("property_type", "city")


class PropertyRepository(ABC):
    """
    Classe abstrata para o repositório de imóveis.

    Implementações devem fornecer:
    - find(): página de imóveis com dono e imobiliária carregados
    - count(): total de imóveis que atendem ao predicado
    - price_range(): menor e maior preço
    - find_distinct(): valores distintos de um campo
    """

    @abstractmethod
    async def find(
        self,
        predicate: SearchPredicate,
        skip: int,
        take: int,
        sort_by: str,
        sort_order: str,
    ) -> Sequence[Property]:
        pass

    @abstractmethod
    async def count(self, predicate: SearchPredicate) -> int:
        pass

    @abstractmethod
    async def price_range(self, predicate: SearchPredicate) -> Tuple[Optional[float], Optional[float]]:
        """
        Returns:
            (min, max) - ambos None quando nenhum imóvel atende ao predicado
        """
        pass

    @abstractmethod
    async def find_distinct(self, predicate: SearchPredicate, field: str) -> List[Any]:
        """
        Args:
            field: um de DISTINCT_FIELDS
        """
        pass
