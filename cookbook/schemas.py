"""Person API schemas.

Fields are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Address(CamelModel):
    """Postal address."""
    street: str
    city: str
    state: str
    zip_code: int


class Person(CamelModel):
    """A person with optional work address."""
    first_name: str
    last_name: str
    age: int
    email: str
    phone_number: str
    home_address: Address
    work_address: Address | None = None
