"""
Project decoded records down to the plain dicts returned by the public
entry points. Pure and total: every record maps to a JSON-serialisable dict.
"""
from dataclasses import asdict

from decoder.records import DecodedRecord, InitializeData


def to_public(record: DecodedRecord) -> dict:
    # initialize carries curve/vesting params callers never need
    if isinstance(record, InitializeData):
        return {
            "name": record.base_mint_param.name,
            "symbol": record.base_mint_param.symbol,
        }
    return asdict(record)


def to_full(record: DecodedRecord) -> dict:
    """Every decoded field, nested records included (CLI --full)."""
    return asdict(record)
