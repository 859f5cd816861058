"""
Public decode entry points.

Each parse_* function takes raw instruction (or account) data, discriminator
included, and returns a plain dict or None. Nothing raises on bad input:
empty, truncated, garbage and non-bytes inputs all come back as None.

decode() is the same pipeline with the failure kept:

    result = decode("pumpfun_create", data)
    if result.ok:
        print(result.record.mint)
    else:
        print(result.error.kind)

Pipeline: strip discriminator -> schema or manual decoder -> normalizer.
"""
import logging
from dataclasses import dataclass

import config
from decoder.constants import (
    FORMAT_BOOP_CREATE_TOKEN,
    FORMAT_CURVE_STATE,
    FORMAT_MOONSHOT_TOKEN_MINT,
    FORMAT_PUMP_FUN_CREATE,
    FORMAT_RAYDIUM_INITIALIZE,
)
from decoder.decoders import Decoder, ManualDecoder, SchemaDecoder, build_create_token_args, build_initialize_data
from decoder.discriminator import strip_discriminator
from decoder.errors import DecodeError, InvalidEncoding
from decoder.normalizer import to_public
from decoder.parsers import parse_create_metadata, parse_curve_state_fields, parse_moonshot_mint_fields
from decoder.records import DecodedRecord
from decoder.schemas import CreateTokenArgsLayout, InitializeDataLayout

logger = logging.getLogger("decoder")

DECODERS: dict[str, Decoder] = {
    FORMAT_BOOP_CREATE_TOKEN: SchemaDecoder(
        FORMAT_BOOP_CREATE_TOKEN, CreateTokenArgsLayout, build_create_token_args
    ),
    FORMAT_RAYDIUM_INITIALIZE: SchemaDecoder(
        FORMAT_RAYDIUM_INITIALIZE, InitializeDataLayout, build_initialize_data
    ),
    FORMAT_PUMP_FUN_CREATE: ManualDecoder(FORMAT_PUMP_FUN_CREATE, parse_create_metadata),
    FORMAT_CURVE_STATE: ManualDecoder(FORMAT_CURVE_STATE, parse_curve_state_fields),
    FORMAT_MOONSHOT_TOKEN_MINT: ManualDecoder(FORMAT_MOONSHOT_TOKEN_MINT, parse_moonshot_mint_fields),
}


@dataclass(frozen=True)
class DecodeResult:
    """Exactly one of record / error is set."""

    format: str
    record: DecodedRecord | None = None
    error: DecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def public(self) -> dict | None:
        return to_public(self.record) if self.record is not None else None


def decode(fmt: str, data) -> DecodeResult:
    """Run the full pipeline for one format. Raises only for an unknown format name."""
    decoder = DECODERS.get(fmt)
    if decoder is None:
        raise ValueError(f"unknown format {fmt!r} (expected one of {', '.join(DECODERS)})")

    if not isinstance(data, (bytes, bytearray, memoryview)):
        error = InvalidEncoding(f"expected a bytes-like buffer, got {type(data).__name__}")
        return _failed(fmt, error, data)

    if isinstance(data, memoryview):
        data = data.tobytes()

    try:
        record = decoder.decode(strip_discriminator(data))
    except DecodeError as e:
        return _failed(fmt, e, data)
    return DecodeResult(format=fmt, record=record)


def _failed(fmt: str, error: DecodeError, data) -> DecodeResult:
    if config.LOG_DECODE_FAILURES:
        size = len(data) if isinstance(data, (bytes, bytearray, memoryview)) else "?"
        logger.debug(f"[{fmt}] rejected {size}-byte buffer: {error}")
    return DecodeResult(format=fmt, error=error)


def _parse(fmt: str, data) -> dict | None:
    return decode(fmt, data).public()


# ── Entry points ────────────────────────────────────────────────


def parse_boop_create_token(data) -> dict | None:
    """Boop create_token -> {salt, name, symbol, uri}."""
    return _parse(FORMAT_BOOP_CREATE_TOKEN, data)


def parse_raydium_initialize(data) -> dict | None:
    """Raydium Launchpad initialize -> {name, symbol}."""
    return _parse(FORMAT_RAYDIUM_INITIALIZE, data)


def parse_pump_fun_create(data) -> dict | None:
    """Pump.fun / LetsBonk create -> {name, symbol, uri, mint, bonding_curve, developer}."""
    return _parse(FORMAT_PUMP_FUN_CREATE, data)


def parse_curve_state(data) -> dict | None:
    """BondingCurve account data -> five reserves + complete flag."""
    return _parse(FORMAT_CURVE_STATE, data)


def parse_moonshot_token_mint(data) -> dict | None:
    """Moonshot token_mint -> {name, symbol}."""
    return _parse(FORMAT_MOONSHOT_TOKEN_MINT, data)


# Names used by the JS-side callers
parseBoopCreateToken = parse_boop_create_token
parseRaydiumInitialize = parse_raydium_initialize
parsePumpFunCreate = parse_pump_fun_create
parseCurveState = parse_curve_state
parseMoonshotTokenMint = parse_moonshot_token_mint
