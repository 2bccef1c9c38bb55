"""Serviços de domínio."""
