"""
REPOSITÓRIO DE IMÓVEIS - SQLAlchemy
====================================

Traduz o SearchPredicate para cláusulas WHERE.

Exemplo:
    SearchPredicate(status="AVAILABLE", price_min=100000, price_max=500000)
    ->
    WHERE properties.status = 'AVAILABLE'
      AND properties.price >= 100000
      AND properties.price <= 500000

Amenidades usam contenção JSONB (@>): o imóvel precisa ter todas.
Cidade/estado usam ILIKE '%valor%' com curingas escapados.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from sqlalchemy import Select, and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from imoveis.domain.entities import Property
from imoveis.infrastructure.repositories.interface import DISTINCT_FIELDS, PropertyRepository
from imoveis.services.search_params import SearchPredicate

logger = logging.getLogger(__name__)


SORT_COLUMNS = {
    "price": Property.price,
    "createdAt": Property.created_at,
    "views": Property.views_count,
    "favorites": Property.favorites_count,
    "area": Property.area,
}


def _contains_pattern(value: str) -> str:
    """Padrão ILIKE de substring, escapando os curingas do próprio valor."""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def build_conditions(predicate: SearchPredicate) -> list:
    """Lista de condições (AND) equivalente ao predicado."""
    conditions = [Property.status == predicate.status]

    if predicate.property_type:
        conditions.append(Property.property_type == predicate.property_type)

    if predicate.price_min is not None:
        conditions.append(Property.price >= predicate.price_min)
    if predicate.price_max is not None:
        conditions.append(Property.price <= predicate.price_max)

    if predicate.city:
        conditions.append(Property.city.ilike(_contains_pattern(predicate.city), escape="\\"))
    if predicate.state:
        conditions.append(Property.state.ilike(_contains_pattern(predicate.state), escape="\\"))

    if predicate.bedrooms_min is not None:
        conditions.append(Property.bedrooms >= predicate.bedrooms_min)
    if predicate.bedrooms_max is not None:
        conditions.append(Property.bedrooms <= predicate.bedrooms_max)

    if predicate.bathrooms_min is not None:
        conditions.append(Property.bathrooms >= predicate.bathrooms_min)
    if predicate.bathrooms_max is not None:
        conditions.append(Property.bathrooms <= predicate.bathrooms_max)

    if predicate.area_min is not None:
        conditions.append(Property.area >= predicate.area_min)
    if predicate.area_max is not None:
        conditions.append(Property.area <= predicate.area_max)

    if predicate.parking_spaces_min is not None:
        conditions.append(Property.parking_spaces >= predicate.parking_spaces_min)

    if predicate.amenities:
        conditions.append(Property.amenities.contains(list(predicate.amenities)))

    return conditions


def build_search_query(
    predicate: SearchPredicate,
    skip: int,
    take: int,
    sort_by: str,
    sort_order: str,
) -> Select:
    """SELECT paginado, ordenado, com dono e imobiliária."""
    column = SORT_COLUMNS.get(sort_by, Property.created_at)
    ordering = column.asc() if sort_order == "asc" else column.desc()

    return (
        select(Property)
        .where(and_(*build_conditions(predicate)))
        .options(selectinload(Property.owner), selectinload(Property.company))
        .order_by(ordering, Property.id.asc())
        .offset(skip)
        .limit(take)
    )


def build_count_query(predicate: SearchPredicate) -> Select:
    return select(func.count(Property.id)).where(and_(*build_conditions(predicate)))


class SqlAlchemyPropertyRepository(PropertyRepository):
    """Repositório sobre uma AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find(
        self,
        predicate: SearchPredicate,
        skip: int,
        take: int,
        sort_by: str,
        sort_order: str,
    ) -> Sequence[Property]:
        query = build_search_query(predicate, skip, take, sort_by, sort_order)
        result = await self.db.execute(query)
        return result.scalars().all()

    async def count(self, predicate: SearchPredicate) -> int:
        result = await self.db.execute(build_count_query(predicate))
        return result.scalar() or 0

    async def price_range(self, predicate: SearchPredicate) -> Tuple[Optional[float], Optional[float]]:
        result = await self.db.execute(
            select(func.min(Property.price), func.max(Property.price))
            .where(and_(*build_conditions(predicate)))
        )
        low, high = result.one()
        return (
            float(low) if low is not None else None,
            float(high) if high is not None else None,
        )

    async def find_distinct(self, predicate: SearchPredicate, field: str) -> List[Any]:
        if field not in DISTINCT_FIELDS:
            raise ValueError(f"Campo não suportado para distinct: {field}")

        column = getattr(Property, field)
        result = await self.db.execute(
            select(column).where(and_(*build_conditions(predicate))).distinct()
        )
        return list(result.scalars().all())
