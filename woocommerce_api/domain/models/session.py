"""Responses of the authentication routes."""

from typing import Optional, Union

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel


class AuthSession(WooModel):
    """Answer of ``login`` and ``register``."""

    user_id: Optional[int] = None

    @classmethod
    def fake(cls) -> "AuthSession":
        return cls(user_id=FakeHelper.integer())


class PasswordChange(WooModel):
    """Answer of ``change-password``; ``status`` is whatever the store plugin reports."""

    status: Optional[Union[bool, str]] = None

    @classmethod
    def fake(cls) -> "PasswordChange":
        return cls(status=True)


class PasswordReset(WooModel):
    """
    Answer of ``forgot-password``: the user the reset code was issued for.

    The server sends ``user_id`` as a string; it decodes to an int.
    """

    user_id: Optional[int] = None
    code: Optional[str] = None

    @classmethod
    def fake(cls) -> "PasswordReset":
        return cls(user_id=FakeHelper.integer(), code=FakeHelper.code())
