"""Schemas de entrada e saída da API."""
