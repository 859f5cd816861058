"""
Manual field parsers for formats with irregular or undocumented layouts.

Each parser is a fixed sequence of Cursor reads over the payload (the
instruction data with its discriminator already removed). The first failed
read propagates; a record is only built once every field has decoded.
"""
from decoder.cursor import Cursor
from decoder.records import ComputedTokenMetaData, CurveState, MoonshotMint


def parse_create_metadata(payload) -> ComputedTokenMetaData:
    """Pump.fun / LetsBonk create: 3 strings then 3 public keys."""
    cur = Cursor(payload)
    name = cur.read_string()
    symbol = cur.read_string()
    uri = cur.read_string()
    mint = cur.read_pubkey()
    bonding_curve = cur.read_pubkey()
    developer = cur.read_pubkey()
    return ComputedTokenMetaData(
        name=name,
        symbol=symbol,
        uri=uri,
        mint=mint,
        bonding_curve=bonding_curve,
        developer=developer,
    )


def parse_curve_state_fields(payload) -> CurveState:
    """BondingCurve account: 5 x u64 reserves, then the `complete` flag."""
    cur = Cursor(payload)
    virtual_token_reserves = cur.read_u64()
    virtual_sol_reserves = cur.read_u64()
    real_token_reserves = cur.read_u64()
    real_sol_reserves = cur.read_u64()
    token_total_supply = cur.read_u64()
    complete = cur.read_bool()
    return CurveState(
        virtual_token_reserves=virtual_token_reserves,
        virtual_sol_reserves=virtual_sol_reserves,
        real_token_reserves=real_token_reserves,
        real_sol_reserves=real_sol_reserves,
        token_total_supply=token_total_supply,
        complete=complete,
    )


def parse_moonshot_mint_fields(payload) -> MoonshotMint:
    # Only name/symbol are needed; the rest of TokenMintParams is left unread.
    cur = Cursor(payload)
    name = cur.read_string()
    symbol = cur.read_string()
    return MoonshotMint(name=name, symbol=symbol)
