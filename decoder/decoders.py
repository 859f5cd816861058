"""
The two decode disciplines behind one interface.

    SchemaDecoder: a static construct layout parsed in one pass
    ManualDecoder: a hand-written Cursor sequence (decoder.parsers)

Both take the payload (discriminator already stripped) and return a record
or raise a DecodeError. The caller picks the decoder per program format;
nothing here guesses.
"""
from typing import Callable

from construct import ConstructError

from decoder.errors import DeserializeError
from decoder.records import (
    CreateTokenArgs,
    CurveParams,
    DecodedRecord,
    InitializeData,
    MintParams,
    VestingParam,
)
from decoder.schemas import CURVE_VARIANTS, exact


class Decoder:
    """decode(payload) -> record, raising DecodeError on malformed input."""

    name: str = ""
    strategy: str = ""

    def decode(self, payload) -> DecodedRecord:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class SchemaDecoder(Decoder):
    strategy = "schema"

    def __init__(self, name: str, layout, build: Callable[..., DecodedRecord]):
        self.name = name
        self.layout = exact(layout)
        self.build = build

    def decode(self, payload) -> DecodedRecord:
        try:
            parsed = self.layout.parse(bytes(payload))
        except ConstructError as e:
            raise DeserializeError(f"{self.name}: {e}") from e
        except UnicodeDecodeError as e:
            raise DeserializeError(f"{self.name}: string is not valid UTF-8 ({e.reason})") from e
        return self.build(parsed.value)


class ManualDecoder(Decoder):
    strategy = "manual"

    def __init__(self, name: str, parse: Callable[..., DecodedRecord]):
        self.name = name
        self.parse = parse

    def decode(self, payload) -> DecodedRecord:
        return self.parse(payload)


# ── Container -> record builders for the schema layouts ─────────


def build_create_token_args(c) -> CreateTokenArgs:
    return CreateTokenArgs(salt=c.salt, name=c.name, symbol=c.symbol, uri=c.uri)


def build_initialize_data(c) -> InitializeData:
    mint = c.base_mint_param
    curve = c.curve_param
    vesting = c.vesting_param
    return InitializeData(
        base_mint_param=MintParams(
            decimals=mint.decimals,
            name=mint.name,
            symbol=mint.symbol,
            uri=mint.uri,
        ),
        curve_param=CurveParams(
            variant=CURVE_VARIANTS[curve.tag],
            supply=curve.data.supply,
            total_quote_fund_raising=curve.data.total_quote_fund_raising,
            migrate_type=curve.data.migrate_type,
            total_base_sell=curve.data.get("total_base_sell"),
        ),
        vesting_param=VestingParam(
            total_locked_amount=vesting.total_locked_amount,
            cliff_period=vesting.cliff_period,
            unlock_period=vesting.unlock_period,
        ),
    )
