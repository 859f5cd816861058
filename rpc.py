"""
Minimal Solana JSON-RPC client for pulling raw bytes to decode.

    get_instruction_data(signature, program_id)
        getTransaction(jsonParsed) → base58 `data` of every top-level and
        inner instruction issued to program_id
    get_account_data(address)
        getAccountInfo(base64) → raw account bytes

Uses raw JSON-RPC via aiohttp (no solana-py dependency).
"""
import asyncio
import base64
import binascii
import logging
import time

import aiohttp

import config
from decoder.encoding import bytes_from_text
from decoder.errors import InvalidEncoding

logger = logging.getLogger("sol_rpc")

# Rate limit: min 100ms between RPC calls (public endpoints throttle hard)
MIN_RPC_INTERVAL = 0.1


class SolanaRpc:
    """Async fetcher for transaction instruction data and account data."""

    def __init__(self, http_url: str | None = None, session=None, timeout: float | None = None):
        self.http_url = http_url or config.SOL_RPC_HTTP
        self.timeout = timeout if timeout is not None else config.RPC_TIMEOUT_S
        self._session = session
        self._owns_session = session is None
        self._lock = asyncio.Lock()
        self._last_call: float = 0.0

    async def _ensure_session(self):
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
            self._owns_session = True

    async def close(self):
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    async def _call(self, method: str, params: list) -> dict | None:
        """POST one JSON-RPC request. Returns `result`, or None on any transport/RPC error."""
        await self._ensure_session()
        async with self._lock:
            wait = MIN_RPC_INTERVAL - (time.time() - self._last_call)
            if wait > 0:
                await asyncio.sleep(wait)

            try:
                async with self._session.post(
                    self.http_url,
                    json={"jsonrpc": "2.0", "id": 1, "method": method, "params": params},
                ) as resp:
                    self._last_call = time.time()
                    data = await resp.json()
            except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
                logger.debug(f"RPC {method} failed: {e}")
                return None

        if not isinstance(data, dict):
            logger.debug(f"RPC {method} failed: non-object response {type(data).__name__}")
            return None
        if data.get("error"):
            logger.warning(f"RPC {method} error: {data['error']}")
            return None
        return data.get("result")

    async def get_transaction(self, signature: str) -> dict | None:
        return await self._call(
            "getTransaction",
            [
                signature,
                {
                    "encoding": "jsonParsed",
                    "maxSupportedTransactionVersion": 0,
                    "commitment": "confirmed",
                },
            ],
        )

    async def get_instruction_data(self, signature: str, program_id: str) -> list[bytes]:
        """Raw data of every instruction in the tx addressed to program_id."""
        tx = await self.get_transaction(signature)
        if tx is None:
            logger.info(f"Transaction {signature[:16]}... not found")
            return []
        return extract_instruction_data(tx, program_id)

    async def get_account_data(self, address: str) -> bytes | None:
        result = await self._call(
            "getAccountInfo",
            [address, {"encoding": "base64", "commitment": "confirmed"}],
        )
        value = (result or {}).get("value")
        if value is None:
            logger.info(f"Account {address[:8]}... not found")
            return None
        data = value.get("data") or []
        if not data:
            return None
        try:
            return base64.b64decode(data[0])
        except binascii.Error as e:
            logger.debug(f"Account {address[:8]}... data is not base64: {e}")
            return None


def extract_instruction_data(tx: dict, program_id: str) -> list[bytes]:
    """
    Collect base58 instruction data for program_id from a jsonParsed tx.

    Top-level instructions come first, then inner (CPI) instructions.
    Instructions the RPC node parsed itself (no `data` field) are skipped.
    """
    message = tx.get("transaction", {}).get("message", {})
    candidates = list(message.get("instructions", []))
    for group in (tx.get("meta") or {}).get("innerInstructions", []) or []:
        candidates.extend(group.get("instructions", []))

    out = []
    for ix in candidates:
        if ix.get("programId") != program_id or "data" not in ix:
            continue
        try:
            out.append(bytes_from_text(ix["data"], "base58"))
        except InvalidEncoding as e:
            logger.debug(f"Skipping instruction with bad data: {e}")
    return out
