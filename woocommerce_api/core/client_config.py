"""
Configuración explícita de una instancia del cliente.

Reemplaza el estado global: cada `ResourceClient` recibe un `ClientConfig`
con el modo faker, el almacén de credenciales y los límites de paginación.
"""

from dataclasses import dataclass, field
from typing import Optional

from woocommerce_api.core.config import Settings, get_settings
from woocommerce_api.core.credential_store import CredentialStore, InMemoryCredentialStore


@dataclass(frozen=True)
class ClientConfig:
    """
    Estado inmutable compartido por los clientes de recursos.

    Attributes:
        use_faker: Devuelve datos sintéticos en lugar de llamar a la red
        credential_store: Persistencia del usuario autenticado
        per_page_max: Máximo de per_page declarado por el servidor (informativo)
        default_per_page: Cantidad de elementos en listados sin paginación
    """

    use_faker: bool = False
    credential_store: CredentialStore = field(default_factory=InMemoryCredentialStore)
    per_page_max: int = 100
    default_per_page: int = 10

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, credential_store: Optional[CredentialStore] = None
    ) -> "ClientConfig":
        """
        Construye la configuración a partir de `Settings`.

        Args:
            settings: Configuración cargada del entorno (por defecto get_settings())
            credential_store: Almacén a usar; en memoria si no se indica
        """
        settings = settings or get_settings()
        return cls(
            use_faker=settings.WOOCOMMERCE_USE_FAKER,
            credential_store=credential_store or InMemoryCredentialStore(),
            per_page_max=settings.WOOCOMMERCE_PER_PAGE_MAX,
            default_per_page=settings.WOOCOMMERCE_DEFAULT_PER_PAGE,
        )

    def resolve_faker(self, use_faker: Optional[bool] = None) -> bool:
        """El valor por llamada tiene prioridad sobre el de la configuración."""
        return self.use_faker if use_faker is None else use_faker
