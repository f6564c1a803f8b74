# /app.py

from gs1_checkdigit import compute_check_digit, compute_master_case_code
from gtin_case_code import app, db
from gtin_case_code.catalog import repository
from gtin_case_code.models import GtinRecord

@app.shell_context_processor
def make_shell_context():
    """Create a shell context for the application -
    for working with the GTIN database in the Flask shell"""
    return {
        'db': db,
        'GtinRecord': GtinRecord,
        'repository': repository,
        'compute_check_digit': compute_check_digit,
        'compute_master_case_code': compute_master_case_code,
    }
