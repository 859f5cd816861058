"""
Solana program IDs, discriminators and field widths for the supported
token-launch formats.

Parsers never compare discriminators (decoding is structural only).
The tags below exist so callers can pick a parser for an instruction
whose program is known but whose instruction type is not.
"""
import hashlib
import struct

# ═══════════════════════════════════════════════════════════════
#  PROGRAM IDS
# ═══════════════════════════════════════════════════════════════

# All-zero key, base58 "111...1"
SYSTEM_PROGRAM = "11111111111111111111111111111111"

# Pump.fun bonding-curve launchpad (create + BondingCurve account)
PUMP_FUN = "6EF8rrecthR5Dkzon8Nwu78hRvfCKubJ14M5uBEwF6P"

# Raydium Launchpad (LetsBonk launches go through it)
RAYDIUM_LAUNCHPAD = "LanMV9sAd7wArD4vJFi2qDdfnVhFxYSUg6eADduJ3uj"

# Boop.fun launchpad
BOOP = "boop8hVGQGqehUK2iVEMEnMrL5RbjywRzHKBmBE7ry4"

# Moonshot (DEX Screener launchpad)
MOONSHOT = "MoonCVVNZFSYkqNXP6bxHLPL6QQJiMagDL3qcqUQTrG"

# ═══════════════════════════════════════════════════════════════
#  LAYOUT WIDTHS (bytes)
# ═══════════════════════════════════════════════════════════════

DISCRIMINATOR_SIZE = 8
PUBKEY_SIZE = 32
STRING_PREFIX_SIZE = 4      # u32 little-endian length
U32_SIZE = 4
U64_SIZE = 8
BOOL_SIZE = 1

# ═══════════════════════════════════════════════════════════════
#  ANCHOR DISCRIMINATORS
#
#  Instructions: sha256("global:<ix_name>")[:8]
#  Accounts:     sha256("account:<AccountName>")[:8]
# ═══════════════════════════════════════════════════════════════


def sighash(name: str, namespace: str = "global") -> bytes:
    return hashlib.sha256(f"{namespace}:{name}".encode()).digest()[:DISCRIMINATOR_SIZE]


PUMP_FUN_CREATE_DISCRIMINATOR = struct.pack("<Q", 8576854823835016728)
RAYDIUM_INITIALIZE_DISCRIMINATOR = sighash("initialize")
BOOP_CREATE_TOKEN_DISCRIMINATOR = sighash("create_token")
MOONSHOT_TOKEN_MINT_DISCRIMINATOR = sighash("token_mint")
BONDING_CURVE_ACCOUNT_DISCRIMINATOR = sighash("BondingCurve", namespace="account")

# ═══════════════════════════════════════════════════════════════
#  FORMAT NAMES
# ═══════════════════════════════════════════════════════════════

FORMAT_BOOP_CREATE_TOKEN = "boop_create_token"
FORMAT_RAYDIUM_INITIALIZE = "raydium_initialize"
FORMAT_PUMP_FUN_CREATE = "pumpfun_create"
FORMAT_CURVE_STATE = "curve_state"
FORMAT_MOONSHOT_TOKEN_MINT = "moonshot_token_mint"

# Program that emits each format (used by the CLI to filter tx instructions)
FORMAT_PROGRAMS = {
    FORMAT_BOOP_CREATE_TOKEN: BOOP,
    FORMAT_RAYDIUM_INITIALIZE: RAYDIUM_LAUNCHPAD,
    FORMAT_PUMP_FUN_CREATE: PUMP_FUN,
    FORMAT_CURVE_STATE: PUMP_FUN,
    FORMAT_MOONSHOT_TOKEN_MINT: MOONSHOT,
}

KNOWN_DISCRIMINATORS = {
    PUMP_FUN_CREATE_DISCRIMINATOR: FORMAT_PUMP_FUN_CREATE,
    RAYDIUM_INITIALIZE_DISCRIMINATOR: FORMAT_RAYDIUM_INITIALIZE,
    BOOP_CREATE_TOKEN_DISCRIMINATOR: FORMAT_BOOP_CREATE_TOKEN,
    MOONSHOT_TOKEN_MINT_DISCRIMINATOR: FORMAT_MOONSHOT_TOKEN_MINT,
    BONDING_CURVE_ACCOUNT_DISCRIMINATOR: FORMAT_CURVE_STATE,
}
