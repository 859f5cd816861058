"""
Tests for the schema-driven decoders (Boop create_token, Raydium Launchpad
initialize).
Run: python3 test_schema.py   (or pytest)
"""
import struct
import sys

# Ensure project root is on path
sys.path.insert(0, ".")

from decoder.api import decode, parse_boop_create_token, parse_raydium_initialize
from decoder.constants import BOOP_CREATE_TOKEN_DISCRIMINATOR, RAYDIUM_INITIALIZE_DISCRIMINATOR
from decoder.normalizer import to_full, to_public
from decoder.records import CurveParams, InitializeData, MintParams, VestingParam

DISC = b"\xde\xad\xbe\xef" * 2


def borsh_str(s: str | bytes) -> bytes:
    raw = s.encode() if isinstance(s, str) else s
    return struct.pack("<I", len(raw)) + raw


def make_boop_create(salt=7, name="Boop Cat", symbol="BCAT", uri="ipfs://cat", disc=DISC) -> bytes:
    return disc + struct.pack("<Q", salt) + borsh_str(name) + borsh_str(symbol) + borsh_str(uri)


def make_curve(tag: int) -> bytes:
    if tag == 0:  # Constant
        return bytes([0]) + struct.pack("<QQQB", 10**15, 793 * 10**12, 85 * 10**9, 1)
    # Fixed / Linear share one layout
    return bytes([tag]) + struct.pack("<QQB", 10**15, 85 * 10**9, 0)


def make_raydium_initialize(
    name="Bonk Dog",
    symbol="BDOG",
    uri="https://letsbonk.fun/meta.json",
    decimals=6,
    curve_tag=0,
    vesting=(0, 0, 0),
    disc=DISC,
) -> bytes:
    return (
        disc
        + bytes([decimals])
        + borsh_str(name)
        + borsh_str(symbol)
        + borsh_str(uri)
        + make_curve(curve_tag)
        + struct.pack("<3Q", *vesting)
    )


# ══════════════════════════════════════════════════════════════
#  BOOP CREATE_TOKEN
# ══════════════════════════════════════════════════════════════


def test_boop_create_token():
    args = parse_boop_create_token(make_boop_create(disc=BOOP_CREATE_TOKEN_DISCRIMINATOR))
    assert args == {"salt": 7, "name": "Boop Cat", "symbol": "BCAT", "uri": "ipfs://cat"}


def test_boop_truncated():
    data = make_boop_create()
    for n in range(len(data)):
        result = decode("boop_create_token", data[:n])
        assert result.record is None
        assert result.error.kind in ("short_buffer", "deserialize_error")


def test_boop_trailing_bytes_rejected():
    result = decode("boop_create_token", make_boop_create() + b"\x00")
    assert result.record is None
    assert result.error.kind == "deserialize_error"


def test_boop_invalid_utf8():
    result = decode("boop_create_token", make_boop_create(symbol=b"\xff"))
    assert result.error.kind == "deserialize_error"


# ══════════════════════════════════════════════════════════════
#  RAYDIUM LAUNCHPAD INITIALIZE
# ══════════════════════════════════════════════════════════════


def test_raydium_initialize_public_shape():
    out = parse_raydium_initialize(make_raydium_initialize(disc=RAYDIUM_INITIALIZE_DISCRIMINATOR))
    assert out == {"name": "Bonk Dog", "symbol": "BDOG"}


def test_raydium_initialize_full_record():
    result = decode("raydium_initialize", make_raydium_initialize(vesting=(5, 60, 3600)))
    assert result.ok
    assert result.record == InitializeData(
        base_mint_param=MintParams(
            decimals=6, name="Bonk Dog", symbol="BDOG", uri="https://letsbonk.fun/meta.json"
        ),
        curve_param=CurveParams(
            variant="Constant",
            supply=10**15,
            total_quote_fund_raising=85 * 10**9,
            migrate_type=1,
            total_base_sell=793 * 10**12,
        ),
        vesting_param=VestingParam(total_locked_amount=5, cliff_period=60, unlock_period=3600),
    )


def test_raydium_fixed_and_linear_curves():
    for tag, variant in ((1, "Fixed"), (2, "Linear")):
        record = decode("raydium_initialize", make_raydium_initialize(curve_tag=tag)).record
        assert record.curve_param.variant == variant
        assert record.curve_param.total_base_sell is None
        assert record.curve_param.total_quote_fund_raising == 85 * 10**9


def test_raydium_unknown_curve_tag():
    for tag in (3, 7, 255):
        result = decode("raydium_initialize", make_raydium_initialize(curve_tag=tag))
        assert result.record is None, f"tag {tag} decoded"
        assert result.error.kind == "deserialize_error"
        assert parse_raydium_initialize(make_raydium_initialize(curve_tag=tag)) is None


def test_raydium_missing_vesting():
    data = make_raydium_initialize()[:-24]
    result = decode("raydium_initialize", data)
    assert result.error.kind == "deserialize_error"


def test_raydium_discriminator_only():
    assert parse_raydium_initialize(DISC) is None
    assert parse_boop_create_token(DISC) is None


# ══════════════════════════════════════════════════════════════
#  NORMALIZER
# ══════════════════════════════════════════════════════════════


def test_to_full_keeps_nested_params():
    record = decode("raydium_initialize", make_raydium_initialize()).record
    full = to_full(record)
    assert full["base_mint_param"]["decimals"] == 6
    assert full["curve_param"]["variant"] == "Constant"
    assert full["vesting_param"] == {"total_locked_amount": 0, "cliff_period": 0, "unlock_period": 0}
    assert to_public(record) == {"name": "Bonk Dog", "symbol": "BDOG"}


# ══════════════════════════════════════════════════════════════
#  RUN ALL TESTS
# ══════════════════════════════════════════════════════════════

if __name__ == "__main__":
    passed = failed = 0
    print("\n── Schema Decoder Tests ──")
    for name, func in list(globals().items()):
        if not name.startswith("test_"):
            continue
        try:
            func()
            print(f"  PASS  {name[5:]}")
            passed += 1
        except Exception as e:
            print(f"  FAIL  {name[5:]}: {e}")
            failed += 1
    print(f"\n{'='*50}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")
    sys.exit(1 if failed else 0)
