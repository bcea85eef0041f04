"""Integrity Translation: driver unique-violation messages become DuplicateKeyError."""

from sqlalchemy.exc import IntegrityError

from catalog_api.core.errors import DatabaseError, DuplicateKeyError
from catalog_api.infrastructure.database import translate_integrity_error


def _integrity(message: str) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception(message))


def test_sqlite_unique_message():
    err = translate_integrity_error(
        _integrity("UNIQUE constraint failed: categories.name"),
    )
    assert isinstance(err, DuplicateKeyError)
    assert err.field == "name"


def test_postgres_detail_message():
    err = translate_integrity_error(_integrity(
        'duplicate key value violates unique constraint "uq_categories_name"\n'
        "DETAIL:  Key (name)=(Bakery) already exists.",
    ))
    assert isinstance(err, DuplicateKeyError)
    assert err.message == "name already exists"


def test_postgres_constraint_name_only():
    err = translate_integrity_error(_integrity(
        "<class 'asyncpg.exceptions.UniqueViolationError'>: duplicate key value "
        'violates unique constraint "uq_categories_name"',
    ))
    assert isinstance(err, DuplicateKeyError)
    assert err.field == "name"


def test_snake_case_column_reported_in_camel_case():
    err = translate_integrity_error(
        _integrity("UNIQUE constraint failed: items.model_id"),
    )
    assert err.field == "modelId"


def test_other_integrity_errors_are_database_errors():
    err = translate_integrity_error(
        _integrity("NOT NULL constraint failed: items.on_model"),
    )
    assert isinstance(err, DatabaseError)
