"""Settings de integração com a API Tokopedia (fulfillment service).

Lidas apenas pela factory do cliente; o pipeline recebe tudo por
injeção e nunca consulta variáveis de ambiente.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

TOKOPEDIA_API_BASE_URL: str = "https://fs.tokopedia.net"


class TokopediaSettings(BaseModel):
    """Configurações do cliente Tokopedia."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    fs_id: str = Field(
        default="",
        description="ID do fulfillment service emitido pela Tokopedia.",
    )
    access_token: str = Field(
        default="",
        description="Bearer token já obtido pela aplicação.",
    )
    api_base_url: str = Field(
        default=TOKOPEDIA_API_BASE_URL,
        description="URL base da API.",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por requisição (segundos).",
    )
    max_retries: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Tentativas extras do transporte em 429/5xx e falhas de conexão.",
    )
    backoff_base_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Base do backoff exponencial entre tentativas.",
    )
    backoff_max_seconds: float = Field(
        default=30.0,
        ge=0,
        description="Teto do backoff entre tentativas.",
    )

    def validate_settings(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []
        if not self.fs_id:
            errors.append("TOKOPEDIA_FS_ID não configurado")
        if not self.access_token:
            errors.append("TOKOPEDIA_ACCESS_TOKEN não configurado")
        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("TOKOPEDIA_API_BASE_URL deve começar com http:// ou https://")
        return errors


def _load_from_env() -> TokopediaSettings:
    """Carrega TokopediaSettings a partir de variáveis de ambiente."""
    return TokopediaSettings(
        fs_id=os.getenv("TOKOPEDIA_FS_ID", "").strip(),
        access_token=os.getenv("TOKOPEDIA_ACCESS_TOKEN", "").strip(),
        api_base_url=os.getenv("TOKOPEDIA_API_BASE_URL", TOKOPEDIA_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("TOKOPEDIA_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("TOKOPEDIA_MAX_RETRIES", "3")),
        backoff_base_seconds=float(os.getenv("TOKOPEDIA_BACKOFF_BASE_SECONDS", "1")),
        backoff_max_seconds=float(os.getenv("TOKOPEDIA_BACKOFF_MAX_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_tokopedia_settings() -> TokopediaSettings:
    """Retorna instância cacheada de TokopediaSettings."""
    return _load_from_env()
