"""
Property - Imóvel
=================

Anúncio de imóvel para venda ou locação. É a entidade consultada pela
busca pública (/api/search).

Campos principais:
- Classificação (tipo, transação, status)
- Valores comerciais (preço, área, quartos, banheiros, vagas)
- Localização (endereço, cidade, estado, coordenadas)
- Mídia (fotos, tour virtual)
- Amenidades (piscina, churrasqueira, ...)

Contadores de visualização e favoritos são incrementados fora da busca.
"""
from typing import Optional, TYPE_CHECKING, List
from sqlalchemy import String, Integer, ForeignKey, Text, Numeric, Index
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.ext.mutable import MutableList

from .base import Base, TimestampMixin, new_id
from .enums import PriceType, PropertyStatus

if TYPE_CHECKING:
    from .models import Company, User


class Property(Base, TimestampMixin):
    """Imóvel anunciado."""

    __tablename__ = "properties"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    owner_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    company_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("companies.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Basic Info
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    property_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    price_type: Mapped[str] = mapped_column(String(20), default=PriceType.SALE.value, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default=PropertyStatus.AVAILABLE.value, nullable=False, index=True
    )

    # Values
    price: Mapped[float] = mapped_column(Numeric(15, 2), nullable=False, index=True)
    area: Mapped[float] = mapped_column(Numeric(10, 2), nullable=False)
    bedrooms: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    bathrooms: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    parking_spaces: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Location
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    state: Mapped[str] = mapped_column(String(50), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(10), nullable=False)
    country: Mapped[str] = mapped_column(String(60), default="Brasil", nullable=False)
    latitude: Mapped[Optional[float]] = mapped_column(Numeric(10, 8), nullable=True)
    longitude: Mapped[Optional[float]] = mapped_column(Numeric(11, 8), nullable=True)

    # Media
    images: Mapped[List[str]] = mapped_column(
        MutableList.as_mutable(JSONB),
        default=list,
        nullable=False
    )
    virtual_tour_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Amenities (JSONB array)
    amenities: Mapped[List[str]] = mapped_column(
        MutableList.as_mutable(JSONB),
        default=list,
        nullable=False
    )

    # Counters
    views_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    favorites_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Relationships
    owner: Mapped["User"] = relationship(back_populates="properties")
    company: Mapped[Optional["Company"]] = relationship(back_populates="properties")

    # Composite indexes
    __table_args__ = (
        Index("ix_properties_status_type_price", "status", "property_type", "price"),
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, type='{self.property_type}', city='{self.city}', price={self.price})>"
