"""
meme-decoder CLI — decode launchpad instruction / account bytes to JSON.

Usage:
    python main.py pumpfun_create <base58 data>
    python main.py curve_state <base64 data> --encoding base64
    python main.py raydium_initialize --signature <tx sig>   # every matching ix in the tx
    python main.py curve_state --account <bonding curve address>
    python main.py identify <data>                          # name the format by discriminator

One JSON value per decoded buffer is printed (null when a buffer does not
decode). Exit status is 1 when nothing decoded.
"""
import argparse
import asyncio
import json
import logging
import sys

import config
from decoder.api import DECODERS, decode
from decoder.constants import FORMAT_CURVE_STATE, FORMAT_PROGRAMS
from decoder.discriminator import identify_instruction
from decoder.encoding import INPUT_ENCODINGS, bytes_from_text
from decoder.errors import InvalidEncoding
from decoder.normalizer import to_full
from rpc import SolanaRpc

# ── Logging ──
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s | %(name)-14s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger("main")
logging.getLogger("asyncio").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meme-decoder",
        description="Decode Solana token-launch instruction and account data.",
    )
    parser.add_argument("format", choices=[*DECODERS, "identify"])
    parser.add_argument("data", nargs="?", help="raw buffer as text (see --encoding)")
    parser.add_argument(
        "--encoding",
        choices=INPUT_ENCODINGS,
        default=config.DEFAULT_INPUT_ENCODING,
        help="encoding of DATA (default: %(default)s)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--signature", help="decode every matching instruction of this transaction")
    source.add_argument("--account", help="decode this account's data (curve_state only)")
    parser.add_argument("--program", help="override the program id used with --signature")
    parser.add_argument(
        "--full", action="store_true", help="print every decoded field, not just the public shape"
    )
    parser.add_argument("--rpc", default=config.SOL_RPC_HTTP, help="Solana HTTP RPC endpoint")
    return parser


async def fetch_buffers(args) -> list[bytes]:
    async with SolanaRpc(http_url=args.rpc) as rpc:
        if args.account:
            data = await rpc.get_account_data(args.account)
            return [data] if data is not None else []
        program_id = args.program or FORMAT_PROGRAMS[args.format]
        buffers = await rpc.get_instruction_data(args.signature, program_id)
        logger.info(
            f"{len(buffers)} instruction(s) for {program_id[:8]}... in {args.signature[:16]}..."
        )
        return buffers


def render(fmt: str, buf: bytes, full: bool) -> object:
    if fmt == "identify":
        return identify_instruction(buf)
    result = decode(fmt, buf)
    if not result.ok:
        logger.info(f"[{fmt}] {len(buf)} bytes did not decode: {result.error}")
        return None
    return to_full(result.record) if full else result.public()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.account and args.format != FORMAT_CURVE_STATE:
        parser.error("--account only applies to curve_state")
    if args.signature and args.format == "identify" and not args.program:
        parser.error("identify --signature needs --program")

    if args.signature or args.account:
        buffers = asyncio.run(fetch_buffers(args))
    elif args.data:
        try:
            buffers = [bytes_from_text(args.data, args.encoding)]
        except InvalidEncoding as e:
            parser.error(str(e))
    else:
        parser.error("give DATA, --signature or --account")

    decoded = 0
    for buf in buffers:
        out = render(args.format, buf, args.full)
        if out is not None:
            decoded += 1
        print(json.dumps(out))

    return 0 if decoded else 1


if __name__ == "__main__":
    sys.exit(main())
