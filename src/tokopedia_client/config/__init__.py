"""Configuração (settings e logging) do tokopedia_client."""
