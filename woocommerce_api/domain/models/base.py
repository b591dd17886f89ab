"""
Base codec for WooCommerce domain models.

Every resource model is an immutable pydantic model whose fields are all
optional: the payload shape varies with API version and context scope, so a
missing key simply decodes to ``None``. Encoding drops locally absent fields
so partial updates never overwrite server defaults, except the fields a
resource declares in ``REQUIRED_FIELDS``.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
M = TypeVar("M", bound="WooModel")


def coerce_enum(enum_cls: Type[E], value: Any, default: E) -> Optional[E]:
    """
    Decode a wire enum value, degrading unknown values to ``default``.

    Args:
        enum_cls: Target enum class
        value: Raw wire value
        default: Documented fallback for values outside the vocabulary

    Returns:
        The enum member, ``default`` for unknown values, or None if absent
    """
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning(f"Unknown {enum_cls.__name__} value {value!r}, using {default.value!r}")
        return default


def lenient_datetime(value: Any) -> Any:
    """Map empty or unparseable date strings to None instead of failing."""
    if value == "":
        return None
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            logger.warning(f"Unparseable date {value!r}, decoding as None")
            return None
    return value


class WooModel(BaseModel):
    """
    Immutable value object exchanged with the REST API.

    Subclasses declare their fields (with wire aliases where the JSON key is
    not a valid or idiomatic Python name) and implement ``fake()``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def decode(cls: Type[M], data: Mapping[str, Any]) -> M:
        """
        Build a model from a wire JSON object.

        Raises:
            pydantic.ValidationError: If the payload is not an object or a
                field has an incompatible type
        """
        return cls.model_validate(data)

    def encode(self) -> Dict[str, Any]:
        """Serialize to a wire JSON object, omitting absent optional fields."""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if self.REQUIRED_FIELDS:
            required = self.model_dump(mode="json", by_alias=True, include=set(self.REQUIRED_FIELDS))
            for key, value in required.items():
                payload.setdefault(key, value)
        return payload

    def copy_with(self: M, **changes: Any) -> M:
        """
        Return a validated copy with the given fields replaced.

        Raises:
            TypeError: If a field does not exist
            pydantic.ValidationError: If a new value has an incompatible type
        """
        unknown = set(changes) - set(type(self).model_fields)
        if unknown:
            raise TypeError(f"{type(self).__name__} has no fields {sorted(unknown)}")
        return type(self).model_validate({**self.model_dump(exclude_unset=True), **changes})

    @classmethod
    def fake(cls: Type[M]) -> M:
        """Synthesize a plausible instance for the faker backend."""
        raise NotImplementedError(f"{cls.__name__} does not implement fake()")

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.encode()})"
