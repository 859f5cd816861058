"""
Configuration loader — reads .env and exposes all settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# ── Solana RPC ──────────────────────────────────────────────────
# Only used by the CLI when decoding by --signature / --account.
SOL_RPC_HTTP = os.getenv("SOL_RPC_HTTP", "https://api.mainnet-beta.solana.com")
RPC_TIMEOUT_S = float(os.getenv("RPC_TIMEOUT_S", "10"))

# ── Input ──────────────────────────────────────────────────────
# How raw DATA arguments are encoded when --encoding is not given.
# RPC jsonParsed instruction data is base58, account data is base64.
DEFAULT_INPUT_ENCODING = os.getenv("DEFAULT_INPUT_ENCODING", "base58").lower()

# ── Logging ────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# Log every rejected buffer at DEBUG (noisy when scanning many instructions).
LOG_DECODE_FAILURES = os.getenv("LOG_DECODE_FAILURES", "false").lower() == "true"
