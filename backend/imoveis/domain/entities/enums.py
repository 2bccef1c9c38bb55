"""Enums - valores fixos que se repetem no sistema."""

from enum import Enum


class PropertyType(str, Enum):
    """Tipo do imóvel (valor canônico gravado no banco)."""
    HOUSE = "HOUSE"
    APARTMENT = "APARTMENT"
    LAND = "LAND"
    COMMERCIAL = "COMMERCIAL"
    CONDO = "CONDO"


class PriceType(str, Enum):
    """Tipo de transação."""
    SALE = "SALE"                  # Venda
    RENT_MONTHLY = "RENT_MONTHLY"  # Aluguel mensal
    RENT_DAILY = "RENT_DAILY"      # Temporada


class PropertyStatus(str, Enum):
    """Situação do anúncio."""
    AVAILABLE = "AVAILABLE"  # Visível na busca pública
    RENTED = "RENTED"
    SOLD = "SOLD"
    DRAFT = "DRAFT"          # Rascunho, ainda não publicado


class UserRole(str, Enum):
    """Nível de acesso do usuário."""
    USER = "USER"      # Cliente final
    BROKER = "BROKER"  # Corretor, pode anunciar
    ADMIN = "ADMIN"    # Acesso total
