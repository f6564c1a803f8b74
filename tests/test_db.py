import pytest
from sqlalchemy.exc import IntegrityError


def test_can_create_gtin_row(app, db):
    with app.app_context():
        from gtin_case_code.models import GtinRecord

        record = GtinRecord(gtin="04210000526", check_digit="4", master_case_code="10042100005261")
        db.session.add(record)
        db.session.commit()

        assert GtinRecord.query.count() == 1
        assert record.created_at is not None
        assert record.updated_at is not None


def test_master_case_code_is_unique(app, db):
    with app.app_context():
        from gtin_case_code.models import GtinRecord

        db.session.add(GtinRecord(gtin="04210000526", check_digit="4", master_case_code="10042100005261"))
        db.session.add(GtinRecord(gtin="03600029145", check_digit="2", master_case_code="10042100005261"))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_check_digit_must_be_one_character(app, db):
    with app.app_context():
        from gtin_case_code.models import GtinRecord

        db.session.add(GtinRecord(gtin="04210000526", check_digit="44", master_case_code="10042100005261"))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_shell_context_exposes_models(app):
    import app as app_module

    context = app_module.make_shell_context()
    assert context["GtinRecord"].__tablename__ == "gtin"
    assert context["compute_check_digit"]("04210000526") == "4"
