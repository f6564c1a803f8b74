from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GtinValidationResult:
    ok: bool
    value: str | None = None
    error: str | None = None


def normalize_gtin(raw: str | None) -> str:
    if not raw or not isinstance(raw, str):
        return ""
    return "".join(raw.split())


def validate_gtin(raw: str | None, max_length: int) -> GtinValidationResult:
    # Numbers from spreadsheets would lose their leading zeros; only text is accepted.
    if raw is not None and not isinstance(raw, str):
        return GtinValidationResult(ok=False, error="GTIN must be given as text, not a number.")

    value = normalize_gtin(raw)
    if not value:
        return GtinValidationResult(ok=False, error="Enter a GTIN.")
    if not (value.isascii() and value.isdigit()):
        return GtinValidationResult(ok=False, error="GTIN must contain digits only.")

    # Any length is fine for the check digit itself; only the column width limits it.
    if len(value) > max_length:
        return GtinValidationResult(
            ok=False,
            error=f"GTIN must be at most {max_length} digits.",
        )

    return GtinValidationResult(ok=True, value=value)
