"""
Generadores de datos sintéticos para el modo faker.

Valores acotados por tipo semántico (enteros pequeños, palabras, frases,
emails, direcciones, fechas en una ventana futura fija). No son
reproducibles mediante semilla.
"""

from datetime import datetime
from enum import Enum
from typing import Callable, List, Type, TypeVar

from faker import Faker

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_faker = Faker()

_MIN_DATE = datetime(2024, 1, 1)
_MAX_DATE = datetime(2050, 12, 31)


class FakeHelper:
    """Generadores por tipo semántico usados por los `fake()` de los modelos."""

    @staticmethod
    def integer(min_value: int = 1, max_value: int = 100) -> int:
        return _faker.random_int(min=min_value, max=max_value)

    @staticmethod
    def word() -> str:
        return _faker.word()

    @staticmethod
    def slug() -> str:
        return _faker.slug()

    @staticmethod
    def sentence() -> str:
        return _faker.sentence(nb_words=6)

    @staticmethod
    def url() -> str:
        return _faker.url(schemes=["https"])

    @staticmethod
    def image() -> str:
        return _faker.image_url()

    @staticmethod
    def date_time() -> datetime:
        # Sin microsegundos: WooCommerce expone segundos
        return _faker.date_time_between(start_date=_MIN_DATE, end_date=_MAX_DATE).replace(microsecond=0)

    @staticmethod
    def boolean() -> bool:
        return _faker.pybool()

    @staticmethod
    def decimal(max_value: int = 100, digits: int = 2) -> str:
        """Decimal como string, formato que usa WooCommerce para precios y tasas."""
        value = _faker.pyfloat(min_value=0, max_value=max_value, right_digits=digits)
        return f"{value:.{digits}f}"

    @staticmethod
    def list_of(factory: Callable[[], T], max_items: int = 5) -> List[T]:
        return [factory() for _ in range(_faker.random_int(min=0, max=max_items))]

    @staticmethod
    def list_of_integers(max_items: int = 5) -> List[int]:
        return FakeHelper.list_of(FakeHelper.integer, max_items)

    @staticmethod
    def choice(enum_cls: Type[E]) -> E:
        return _faker.random_element(list(enum_cls))

    @staticmethod
    def choice_of(values: List[T]) -> T:
        return _faker.random_element(values)

    @staticmethod
    def first_name() -> str:
        return _faker.first_name()

    @staticmethod
    def last_name() -> str:
        return _faker.last_name()

    @staticmethod
    def username() -> str:
        return _faker.user_name()

    @staticmethod
    def email() -> str:
        return _faker.free_email()

    @staticmethod
    def address() -> str:
        return _faker.street_address()

    @staticmethod
    def city() -> str:
        return _faker.city()

    @staticmethod
    def state() -> str:
        return _faker.state_abbr()

    @staticmethod
    def country_code() -> str:
        return _faker.country_code()

    @staticmethod
    def postcode() -> str:
        return _faker.postcode()

    @staticmethod
    def company() -> str:
        return _faker.company()

    @staticmethod
    def phone_number() -> str:
        return _faker.phone_number()

    @staticmethod
    def code() -> str:
        return _faker.bothify(text="????-####").upper()
