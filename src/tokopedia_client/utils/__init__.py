"""Utilitários compartilhados do tokopedia_client."""
