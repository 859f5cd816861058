"""
Borsh layouts for the Anchor programs whose instruction args are fully
described by their IDLs (Boop create_token, Raydium Launchpad initialize).

Borsh rules:
  integers  : fixed-width little-endian
  String    : u32 LE byte length + UTF-8 bytes
  enum      : u8 variant index + that variant's fields
"""
from construct import Error, Int8ul, Int32ul, Int64ul, PascalString, Struct, Switch, Terminated, this

BorshString = PascalString(Int32ul, "utf8")

# ═══════════════════════════════════════════════════════════════
#  BOOP — create_token(salt: u64, name: String, symbol: String, uri: String)
# ═══════════════════════════════════════════════════════════════

CreateTokenArgsLayout = Struct(
    "salt" / Int64ul,
    "name" / BorshString,
    "symbol" / BorshString,
    "uri" / BorshString,
)

# ═══════════════════════════════════════════════════════════════
#  RAYDIUM LAUNCHPAD — initialize(base_mint_param, curve_param, vesting_param)
# ═══════════════════════════════════════════════════════════════

MintParamsLayout = Struct(
    "decimals" / Int8ul,
    "name" / BorshString,
    "symbol" / BorshString,
    "uri" / BorshString,
)

ConstantCurveLayout = Struct(
    "supply" / Int64ul,
    "total_base_sell" / Int64ul,
    "total_quote_fund_raising" / Int64ul,
    "migrate_type" / Int8ul,
)

FixedCurveLayout = Struct(
    "supply" / Int64ul,
    "total_quote_fund_raising" / Int64ul,
    "migrate_type" / Int8ul,
)

LinearCurveLayout = Struct(
    "supply" / Int64ul,
    "total_quote_fund_raising" / Int64ul,
    "migrate_type" / Int8ul,
)

# Variant index -> name, in IDL declaration order
CURVE_VARIANTS = {0: "Constant", 1: "Fixed", 2: "Linear"}

CurveParamsLayout = Struct(
    "tag" / Int8ul,
    "data" / Switch(
        this.tag,
        {0: ConstantCurveLayout, 1: FixedCurveLayout, 2: LinearCurveLayout},
        default=Error,
    ),
)

VestingParamLayout = Struct(
    "total_locked_amount" / Int64ul,
    "cliff_period" / Int64ul,
    "unlock_period" / Int64ul,
)

InitializeDataLayout = Struct(
    "base_mint_param" / MintParamsLayout,
    "curve_param" / CurveParamsLayout,
    "vesting_param" / VestingParamLayout,
)


def exact(layout):
    """Wrap a layout so parsing fails unless the whole payload is consumed."""
    return Struct("value" / layout, Terminated)
