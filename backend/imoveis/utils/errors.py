"""Exceções da aplicação."""


class ImoveisError(Exception):
    """Exceção base do backend de imóveis."""
    pass


class SearchFailure(ImoveisError):
    """
    Falha na busca principal de imóveis.

    Encapsula qualquer erro vindo do banco (conexão, timeout, query inválida).
    Quem chama não distingue o subtipo: deve tratar como erro de servidor.
    """

    def __init__(self, message: str):
        super().__init__(f"Falha na busca: {message}")
        self.reason = message
