"""Write path for GTIN records.

Every insert and every identifier change goes through ``derive_fields`` so the
check digit and master case code are computed before the row is flushed. The
database holds no triggers; callers writing ``GtinRecord`` rows directly
bypass this and must not.
"""

from __future__ import annotations

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from gs1_checkdigit import InvalidInputError, compute_check_digit, compute_master_case_code
from gtin_case_code import db
from gtin_case_code.catalog.forms import normalize_gtin, validate_gtin
from gtin_case_code.models import GtinRecord


class CatalogError(Exception):
    """Base class for GTIN storage errors."""


class GtinNotFoundError(CatalogError, LookupError):
    pass


class DuplicateGtinError(CatalogError):
    pass


def _clean_gtin(raw: str | None) -> str:
    validation = validate_gtin(raw, current_app.config["GTIN_MAX_LENGTH"])
    if not validation.ok:
        raise InvalidInputError(validation.error)
    return validation.value or ""


def derive_fields(gtin: str) -> dict[str, str]:
    """Both derived columns, computed from the raw GTIN."""
    return {
        "check_digit": compute_check_digit(gtin),
        "master_case_code": compute_master_case_code(gtin),
    }


def _apply_derived_fields(record: GtinRecord, fields: dict[str, str]) -> bool:
    changed = False
    for column, value in fields.items():
        if getattr(record, column) != value:
            setattr(record, column, value)
            changed = True
    return changed


def _is_duplicate(error: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed", PostgreSQL/MySQL: "duplicate key" / "Duplicate entry".
    message = str(error.orig).lower()
    return "unique" in message or "duplicate" in message


def _commit(action: str) -> None:
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        current_app.logger.error(f"Rejected {action}: {e.orig}")
        if _is_duplicate(e):
            raise DuplicateGtinError(f"{action} would duplicate a GTIN or master case code") from e
        raise CatalogError(f"{action} violates a gtin table constraint") from e
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"Failed {action}")
        raise


def get_gtin(gtin: str) -> GtinRecord | None:
    return db.session.get(GtinRecord, normalize_gtin(gtin))


def get_by_master_case_code(master_case_code: str) -> GtinRecord | None:
    return db.session.execute(
        db.select(GtinRecord).filter_by(master_case_code=normalize_gtin(master_case_code))
    ).scalar_one_or_none()


def list_gtins() -> list[GtinRecord]:
    return list(db.session.execute(db.select(GtinRecord).order_by(GtinRecord.gtin)).scalars())


def add_gtin(raw: str, description: str | None = None) -> GtinRecord:
    """Validate ``raw``, derive its check digit and case code, and store it."""
    gtin = _clean_gtin(raw)
    if get_gtin(gtin) is not None:
        raise DuplicateGtinError(f"GTIN {gtin} already exists")

    record = GtinRecord(gtin=gtin, description=description, **derive_fields(gtin))
    db.session.add(record)
    _commit(f"insert of GTIN {gtin}")

    current_app.logger.info(
        f"Stored GTIN {record.gtin} (check digit {record.check_digit}, "
        f"master case code {record.master_case_code})"
    )
    return record


def update_gtin(
    gtin: str,
    new_gtin: str | None = None,
    description: str | None = None,
) -> GtinRecord:
    """Change the identifier and/or description of a stored GTIN.

    The derived columns are recomputed on every update, whether or not the
    identifier changed. ``None`` leaves a field as it is.
    """
    record = get_gtin(gtin)
    if record is None:
        raise GtinNotFoundError(f"GTIN {normalize_gtin(gtin)} not found")

    if new_gtin is not None:
        cleaned = _clean_gtin(new_gtin)
        if cleaned != record.gtin:
            if get_gtin(cleaned) is not None:
                raise DuplicateGtinError(f"GTIN {cleaned} already exists")
            current_app.logger.info(f"Renaming GTIN {record.gtin} to {cleaned}")
            record.gtin = cleaned

    if description is not None:
        record.description = description

    _apply_derived_fields(record, derive_fields(record.gtin))
    _commit(f"update of GTIN {record.gtin}")
    return record


def delete_gtin(gtin: str) -> None:
    record = get_gtin(gtin)
    if record is None:
        raise GtinNotFoundError(f"GTIN {normalize_gtin(gtin)} not found")

    deleted = record.gtin
    db.session.delete(record)
    _commit(f"delete of GTIN {deleted}")
    current_app.logger.info(f"Deleted GTIN {deleted}")


def recompute_derived_fields() -> int:
    """Recompute the derived columns of every stored GTIN.

    Returns the number of rows whose values were out of date. If any stored
    GTIN is not a valid digit string, no row is changed.
    """
    records = list_gtins()
    try:
        derived = [(record, derive_fields(record.gtin)) for record in records]
    except InvalidInputError:
        db.session.rollback()
        current_app.logger.exception("Backfill aborted: a stored GTIN is not a digit string")
        raise

    changed = 0
    for record, fields in derived:
        if _apply_derived_fields(record, fields):
            current_app.logger.warning(f"Repaired derived fields of GTIN {record.gtin}")
            changed += 1

    if changed:
        _commit(f"backfill of {changed} GTIN(s)")
    return changed
