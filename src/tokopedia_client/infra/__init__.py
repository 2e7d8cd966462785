"""Implementações concretas de infraestrutura."""
