"""
Almacenamiento del identificador de usuario autenticado.

El cliente no decide dónde se persiste la sesión: recibe un objeto que
cumple `CredentialStore`. `InMemoryCredentialStore` sirve para scripts y tests.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class CredentialStore(Protocol):
    """Interfaz mínima de persistencia del usuario autenticado."""

    async def get_user_id(self) -> Optional[int]: ...

    async def set_user_id(self, user_id: int) -> None: ...

    async def clear(self) -> None: ...


class InMemoryCredentialStore:
    """Implementación en memoria; el valor se pierde al terminar el proceso."""

    def __init__(self, user_id: Optional[int] = None):
        self._user_id = user_id

    async def get_user_id(self) -> Optional[int]:
        return self._user_id

    async def set_user_id(self, user_id: int) -> None:
        logger.debug(f"Storing authenticated user id {user_id}")
        self._user_id = user_id

    async def clear(self) -> None:
        logger.debug("Clearing authenticated user id")
        self._user_id = None
