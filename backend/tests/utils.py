from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional, Sequence, Tuple

from imoveis.domain.entities import Company, Property, User
from imoveis.infrastructure.repositories.interface import DISTINCT_FIELDS, PropertyRepository
from imoveis.services.search_params import SearchPredicate

BASE_DATE = datetime(2025, 1, 1, tzinfo=timezone.utc)

SORT_ATTRS = {
    "price": "price",
    "createdAt": "created_at",
    "views": "views_count",
    "favorites": "favorites_count",
    "area": "area",
}


def make_owner(**overrides) -> User:
    data = {
        "id": "owner-1",
        "first_name": "Maria",
        "last_name": "Souza",
        "email": "maria@imobiliaria.com.br",
        "phone": "+5562999990000",
        "password_hash": "salt$hash",
        "role": "BROKER",
    }
    data.update(overrides)
    return User(**data)


def make_company(**overrides) -> Company:
    data = {
        "id": "company-1",
        "name": "Imobiliária Central",
        "email": "contato@central.com.br",
        "phone": "+556232320000",
        "website": "https://central.com.br",
    }
    data.update(overrides)
    return Company(**data)


def make_property(id: str, days_ago: int = 0, **overrides) -> Property:
    """Imóvel em memória com todos os campos preenchidos (defaults de coluna só valem no INSERT)."""
    data = {
        "id": id,
        "title": f"Imóvel {id}",
        "description": "Imóvel bem localizado",
        "property_type": "HOUSE",
        "price_type": "SALE",
        "status": "AVAILABLE",
        "price": 300000.0,
        "area": 120.0,
        "bedrooms": 3,
        "bathrooms": 2,
        "parking_spaces": 1,
        "address": "Rua 1, 100",
        "city": "Goiânia",
        "state": "GO",
        "zip_code": "74000-000",
        "country": "Brasil",
        "images": [],
        "amenities": [],
        "views_count": 0,
        "favorites_count": 0,
        "created_at": BASE_DATE - timedelta(days=days_ago),
        "updated_at": BASE_DATE - timedelta(days=days_ago),
    }
    data.update(overrides)
    if "owner" not in data:
        data["owner"] = make_owner()
    return Property(**data)


def sample_listings() -> List[Property]:
    company = make_company()
    return [
        make_property(
            "casa-goiania-1", days_ago=1, price=450000.0, bedrooms=3, area=180.0,
            amenities=["Piscina", "Churrasqueira"], views_count=40, company=company,
        ),
        make_property(
            "casa-goiania-2", days_ago=2, price=600000.0, bedrooms=4, area=250.0,
            amenities=["Piscina"], views_count=10,
        ),
        make_property(
            "apto-goiania", days_ago=3, property_type="APARTMENT", price=320000.0, bedrooms=2,
            bathrooms=1, area=70.0, amenities=["Academia", "Piscina", "Portaria 24h"], views_count=90,
        ),
        make_property(
            "apto-sp", days_ago=4, property_type="APARTMENT", price=850000.0, bedrooms=3,
            area=95.0, parking_spaces=2, city="São Paulo", state="SP", views_count=5,
        ),
        make_property(
            "casa-aparecida", days_ago=5, price=280000.0, bedrooms=3, area=140.0,
            city="Aparecida de Goiânia", views_count=20,
        ),
        make_property("terreno-vendido", days_ago=6, property_type="LAND", price=150000.0, status="SOLD"),
        make_property("casa-rascunho", days_ago=7, price=200000.0, city="Anápolis", status="DRAFT"),
    ]


def _matches(prop: Property, predicate: SearchPredicate) -> bool:
    if prop.status != predicate.status:
        return False
    if predicate.property_type and prop.property_type != predicate.property_type:
        return False

    bounds = [
        (prop.price, predicate.price_min, predicate.price_max),
        (prop.bedrooms, predicate.bedrooms_min, predicate.bedrooms_max),
        (prop.bathrooms, predicate.bathrooms_min, predicate.bathrooms_max),
        (prop.area, predicate.area_min, predicate.area_max),
        (prop.parking_spaces, predicate.parking_spaces_min, None),
    ]
    for value, low, high in bounds:
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False

    if predicate.city and predicate.city.casefold() not in prop.city.casefold():
        return False
    if predicate.state and predicate.state.casefold() not in prop.state.casefold():
        return False

    return set(predicate.amenities) <= set(prop.amenities)


class InMemoryPropertyRepository(PropertyRepository):
    """Repositório em memória com a mesma semântica do SQL."""

    def __init__(self, properties: Optional[Sequence[Property]] = None):
        self.properties = list(properties or [])

    def _filter(self, predicate: SearchPredicate) -> List[Property]:
        return [p for p in self.properties if _matches(p, predicate)]

    async def find(self, predicate, skip, take, sort_by, sort_order) -> List[Property]:
        attr = SORT_ATTRS[sort_by]
        rows = sorted(self._filter(predicate), key=lambda p: p.id)
        rows.sort(key=lambda p: getattr(p, attr), reverse=sort_order == "desc")
        return rows[skip:skip + take]

    async def count(self, predicate) -> int:
        return len(self._filter(predicate))

    async def price_range(self, predicate) -> Tuple[Optional[float], Optional[float]]:
        prices = [p.price for p in self._filter(predicate)]
        if not prices:
            return None, None
        return min(prices), max(prices)

    async def find_distinct(self, predicate, field) -> List[Any]:
        assert field in DISTINCT_FIELDS
        values = []
        for p in self._filter(predicate):
            value = getattr(p, field)
            if value not in values:
                values.append(value)
        return values


class FailingPropertyRepository(PropertyRepository):
    """Simula banco fora do ar."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error or ConnectionError("connection refused")

    async def find(self, predicate, skip, take, sort_by, sort_order):
        raise self.error

    async def count(self, predicate):
        raise self.error

    async def price_range(self, predicate):
        raise self.error

    async def find_distinct(self, predicate, field):
        raise self.error
