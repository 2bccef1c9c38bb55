"""
Middleware de Rate Limiting
Protege a API contra abuso

Limites por ambiente (ver RATE_LIMITS em imoveis.config):
- production: 100 requisições / 15 min por IP
- development: 1000 requisições / 15 min
- test: desligado

Uso nas rotas (a rota precisa receber request e response):
    @router.get("/cities")
    @limiter.shared_limit(search_rate_limit, scope="search")
    async def rota(request: Request, response: Response): ...
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request, Response
from fastapi.responses import JSONResponse

from imoveis.config import RATE_LIMITS, Settings, get_settings


def create_limiter(settings: Settings) -> Limiter:
    """Cria o limiter; desligado quando o ambiente não tem limite."""
    return Limiter(
        key_func=get_remote_address,
        enabled=settings.rate_limit is not None,
        headers_enabled=True,
    )


def search_rate_limit() -> str:
    """Limite das rotas de busca, avaliado a cada requisição."""
    rate_limit = get_settings().rate_limit or RATE_LIMITS["development"]
    return rate_limit.limit_string


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """
    Handler customizado para erro de rate limit.
    Retry-After e X-RateLimit-* são preenchidos pelo próprio limiter.
    """
    response = JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": "Muitas requisições",
            "message": "Muitas requisições. Por favor, aguarde um momento e tente novamente.",
            "limit": str(exc.detail),
        },
    )
    return request.app.state.limiter._inject_headers(response, request.state.view_rate_limit)


# Limiter da aplicação
limiter = create_limiter(get_settings())
