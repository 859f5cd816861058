"""
Decoded records, one per supported program format.

All records are frozen: they are built once, after every field has decoded,
and never mutated.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CreateTokenArgs:
    """Boop.fun create_token instruction args."""

    salt: int                # u64 used to derive the mint PDA
    name: str
    symbol: str
    uri: str


@dataclass(frozen=True)
class MintParams:
    decimals: int
    name: str
    symbol: str
    uri: str


@dataclass(frozen=True)
class CurveParams:
    """
    Raydium Launchpad curve enum, flattened.

    variant is "Constant", "Fixed" or "Linear". Only Constant curves carry
    total_base_sell; it is None for the other two.
    """

    variant: str
    supply: int
    total_quote_fund_raising: int
    migrate_type: int        # 0 = AMM v4, 1 = CPMM
    total_base_sell: int | None = None


@dataclass(frozen=True)
class VestingParam:
    total_locked_amount: int
    cliff_period: int        # seconds
    unlock_period: int       # seconds


@dataclass(frozen=True)
class InitializeData:
    """Raydium Launchpad initialize instruction args."""

    base_mint_param: MintParams
    curve_param: CurveParams
    vesting_param: VestingParam


@dataclass(frozen=True)
class ComputedTokenMetaData:
    """Token-creation metadata for Pump.fun / LetsBonk style instructions."""

    name: str
    symbol: str
    uri: str
    mint: str                # base58
    bonding_curve: str       # base58
    developer: str           # base58


@dataclass(frozen=True)
class CurveState:
    """Pump.fun BondingCurve account (reserves in base units / lamports)."""

    virtual_token_reserves: int
    virtual_sol_reserves: int
    real_token_reserves: int
    real_sol_reserves: int
    token_total_supply: int
    complete: bool           # True once the curve has migrated

    @property
    def reserves(self) -> tuple[int, int, int, int, int]:
        return (
            self.virtual_token_reserves,
            self.virtual_sol_reserves,
            self.real_token_reserves,
            self.real_sol_reserves,
            self.token_total_supply,
        )


@dataclass(frozen=True)
class MoonshotMint:
    name: str
    symbol: str


DecodedRecord = CreateTokenArgs | InitializeData | ComputedTokenMetaData | CurveState | MoonshotMint
