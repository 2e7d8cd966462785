"""Configuração do pytest para o tokopedia_client."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ e a raiz ao PYTHONPATH (imports sem instalação e `tests.fakes`)
project_root = Path(__file__).parent.parent
for path in (project_root, project_root / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from tests.fakes.spy_transport import SpyTransport  # noqa: E402

from tokopedia_client.pipeline import ServiceConfiguration  # noqa: E402

FS_ID = "13004"


@pytest.fixture
def spy_transport() -> SpyTransport:
    """Transporte espião que responde {"status":"OK"}."""
    return SpyTransport()


@pytest.fixture
def service_config(spy_transport: SpyTransport) -> ServiceConfiguration:
    return ServiceConfiguration(fulfillment_service_id=FS_ID, transport=spy_transport)
