"""Excepciones de los colaboradores de analítica (persistencia y notificaciones)."""

from __future__ import annotations


class RepositoryError(Exception):
    """Error base del repositorio de analítica."""


class NotFoundError(RepositoryError):
    def __init__(self, key: str):
        super().__init__(f"Item not found: {key}")
        self.key = key


class SerializationError(RepositoryError):
    """Payload corrupto o no serializable."""


class StoreError(RepositoryError):
    """Fallo de la base de datos subyacente."""


class NotificationError(Exception):
    """Error base de los notificadores."""


class NetworkError(NotificationError):
    """Fallo de transporte (HTTP / SMTP)."""
