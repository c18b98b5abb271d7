"""
Synthetic account records for seeding test CSV files.

This module provides:
  - ValueSource: the protocol for anything that can produce the five account
    field values (account name, account number, amount, first name, email).
  - FakerValueSource: a ValueSource backed by Faker, the default in practice.
  - create_record() / create_records(): assemble values into Records in
    ACCOUNT_HEADERS order.

The generator does no range or format validation of its own; the record shape
is the only contract. Tests inject a deterministic ValueSource instead of
seeding Faker.
"""

import re
from typing import List, Optional, Protocol

from faker import Faker

from csvjson.data.schemas import Record, RecordSet

ACCOUNT_TYPES = [
    "Checking",
    "Savings",
    "Money Market",
    "Investment",
    "Home Loan",
    "Credit Card",
    "Auto Loan",
    "Personal Loan",
]


class ValueSource(Protocol):
    """
    Protocol for the randomness behind a synthetic account record.

    Any class implementing these five methods is a ValueSource; no
    inheritance is needed. `email` receives the first name generated for the
    same record so the two fields stay plausibly related.
    """

    def account_name(self) -> str:
        ...

    def account_number(self) -> str:
        ...

    def amount(self) -> str:
        ...

    def first_name(self) -> str:
        ...

    def email(self, first_name: str) -> str:
        ...


class FakerValueSource:
    """
    ValueSource backed by Faker.

    Args:
        locale: Faker locale for names and email domains (default "en_US").
        seed: Optional seed for reproducible output. Seeds this instance only,
              not Faker globally.
    """

    def __init__(self, locale: str = "en_US", seed: Optional[int] = None):
        self._fake = Faker(locale)
        if seed is not None:
            self._fake.seed_instance(seed)

    def account_name(self) -> str:
        return f"{self._fake.random_element(elements=ACCOUNT_TYPES)} Account"

    def account_number(self) -> str:
        # 8 digits, leading zeros allowed
        return self._fake.numerify("########")

    def amount(self) -> str:
        return f"{self._fake.random.uniform(1, 1000):.2f}"

    def first_name(self) -> str:
        return self._fake.first_name()

    def email(self, first_name: str) -> str:
        local = f"{first_name}.{self._fake.last_name()}".lower()
        local = re.sub(r"[^a-z0-9.]", "", local).strip(".") or "user"
        return f"{local}{self._fake.random_int(min=0, max=99)}@{self._fake.free_email_domain()}"


def create_record(source: ValueSource) -> Record:
    """
    Generate one synthetic account record.

    Args:
        source: Provider of the individual field values.

    Returns:
        Record with keys accountName, accountNumber, amount, firstName, email
        (in that order).
    """
    first_name = source.first_name()

    return {
        "accountName": source.account_name(),
        "accountNumber": source.account_number(),
        "amount": source.amount(),
        "firstName": first_name,
        "email": source.email(first_name),
    }


def create_records(n_records: int, source: ValueSource) -> RecordSet:
    """
    Generate `n_records` synthetic account records in generation order.

    Raises:
        ValueError: If n_records is negative.
    """
    if n_records < 0:
        raise ValueError(f"n_records must be non-negative, got: {n_records}")

    records: List[Record] = [create_record(source) for _ in range(n_records)]
    return records
