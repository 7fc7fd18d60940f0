"""In-memory person repository."""

from __future__ import annotations

from cookbook.registry import LazySingleton
from cookbook.schemas import Address, Person


class PersonRepository:
    """Serves a fixed list of people."""

    def find_all(self) -> list[Person]:
        john = Person(
            first_name="John",
            last_name="Burbridge",
            age=51,
            email="fake@emailaddress.com",
            phone_number="555-516-4620",
            home_address=Address(
                street="1234 Elm Street",
                city="Oakland",
                state="CA",
                zip_code=94619,
            ),
            work_address=None,
        )
        return [john]


_repository_singleton = LazySingleton(PersonRepository, name="person_repository")


def get_person_repository() -> PersonRepository:
    """Return the person repository singleton."""
    return _repository_singleton.get()
