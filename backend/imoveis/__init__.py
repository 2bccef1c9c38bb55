"""Imóveis - busca de imóveis para venda e locação."""

__version__ = "0.1.0"
