"""
Modelos de usuário e imobiliária.
"""

from typing import Optional, TYPE_CHECKING

from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, new_id
from .enums import UserRole

if TYPE_CHECKING:
    from .property import Property


# ============================================
# COMPANY - Imobiliária
# ============================================

class Company(Base, TimestampMixin):
    """Imobiliária à qual corretores e imóveis podem estar vinculados."""

    __tablename__ = "companies"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    users: Mapped[list["User"]] = relationship(back_populates="company")
    properties: Mapped[list["Property"]] = relationship(back_populates="company")


# ============================================
# USER - Cliente, corretor ou admin
# ============================================

class User(Base, TimestampMixin):
    """Usuário da plataforma. Dono dos imóveis que anuncia."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    phone: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), default=UserRole.USER.value)
    company_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("companies.id", ondelete="SET NULL"), nullable=True
    )

    company: Mapped[Optional["Company"]] = relationship(back_populates="users")
    properties: Mapped[list["Property"]] = relationship(back_populates="owner")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
