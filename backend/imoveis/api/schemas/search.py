"""
SCHEMAS DA BUSCA
================

Estrutura das respostas de /api/search.
Dono e imobiliária saem como projeção rasa: só nome e contato, nunca credenciais.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


# ============================================
# PROJEÇÕES DOS RELACIONAMENTOS
# ============================================

class OwnerSummary(BaseModel):
    """Dono do anúncio (sem senha)."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    role: str


class CompanySummary(BaseModel):
    """Imobiliária vinculada ao anúncio."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None


# ============================================
# IMÓVEL
# ============================================

class PropertySearchItem(BaseModel):
    """Imóvel retornado na busca."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    property_type: str
    price_type: str
    status: str
    price: float
    area: float
    bedrooms: int
    bathrooms: int
    parking_spaces: int
    address: str
    city: str
    state: str
    zip_code: str
    country: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    images: List[str] = Field(default_factory=list)
    virtual_tour_url: Optional[str] = None
    amenities: List[str] = Field(default_factory=list)
    views_count: int = 0
    favorites_count: int = 0
    created_at: Optional[datetime] = None
    owner: Optional[OwnerSummary] = None
    company: Optional[CompanySummary] = None


# ============================================
# RESPOSTAS
# ============================================

class PaginationSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    page: int
    limit: int
    total: int
    pages: int


class SearchData(BaseModel):
    properties: List[PropertySearchItem]
    pagination: PaginationSchema
    filters: Dict[str, Any]
    execution_time_ms: int


class SearchResponse(BaseModel):
    success: bool = True
    data: SearchData


class TypesData(BaseModel):
    types: List[str]


class TypesResponse(BaseModel):
    success: bool = True
    data: TypesData


class CitiesData(BaseModel):
    cities: List[str]


class CitiesResponse(BaseModel):
    success: bool = True
    data: CitiesData


class PriceRangeData(BaseModel):
    min: float
    max: float


class PriceRangeResponse(BaseModel):
    success: bool = True
    data: PriceRangeData
