"""
Command-line interface for the address predictor.

  create2-predictor predict --config deployment.json
  create2-predictor predict --summoner 0x.. --rpc-url URL --holder 0x.. --shares 1000
  create2-predictor implementations 0xSUMMONER --rpc-url URL
  create2-predictor deployments 0xSUMMONER --rpc-url URL --from-block 0
  create2-predictor tokens 0xDAO --rpc-url URL
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional

from eth_utils import to_checksum_address
from web3.exceptions import Web3Exception

from predictor.config import load_config
from predictor.core.errors import EncodingError, ValidationError
from predictor.core.encoding import parse_address, parse_bytes32, parse_uint256
from predictor.core.constants import ZERO_SALT
from predictor.core.types import DeploymentConfig
from predictor.predict import predict_all_addresses


logger = logging.getLogger("predictor")

RPC_URL_ENV = "PREDICTOR_RPC_URL"


def _web3_registry(rpc_url: Optional[str]):
    from predictor.registry.web3_registry import Web3Registry

    rpc_url = rpc_url or os.environ.get(RPC_URL_ENV)
    if not rpc_url:
        raise ValidationError(f"--rpc-url (or ${RPC_URL_ENV}) is required")
    return Web3Registry.from_rpc_url(rpc_url)


def _add_rpc_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--rpc-url",
        default=None,
        help=f"JSON-RPC endpoint (default: ${RPC_URL_ENV})",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create2-predictor",
        description="Predict DAO and token addresses deployed by a summoner",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    predict = sub.add_parser("predict", help="Predict DAO and token addresses")
    predict.add_argument("--config", type=str, default=None, help="Path to deployment JSON")
    predict.add_argument("--summoner", type=str, default=None, help="Summoner address")
    predict.add_argument("--dao-impl", type=str, default=None, help="DAO implementation")
    predict.add_argument("--shares-impl", type=str, default=None, help="Shares implementation")
    predict.add_argument("--badges-impl", type=str, default=None, help="Badges implementation")
    predict.add_argument("--loot-impl", type=str, default=None, help="Loot implementation")
    predict.add_argument(
        "--holder", action="append", default=[], help="Initial holder (repeatable, in order)"
    )
    predict.add_argument(
        "--shares", action="append", default=[], help="Initial shares in wei (repeatable, in order)"
    )
    predict.add_argument("--salt", type=str, default=None, help="Custom 32-byte salt")
    predict.add_argument("--json", action="store_true", help="Print JSON")
    _add_rpc_argument(predict)

    impls = sub.add_parser("implementations", help="Fetch implementation addresses")
    impls.add_argument("summoner", help="Summoner address")
    _add_rpc_argument(impls)

    deployments = sub.add_parser("deployments", help="List DAOs deployed by a summoner")
    deployments.add_argument("summoner", help="Summoner address")
    deployments.add_argument("--from-block", type=int, default=0, help="First block to scan")
    _add_rpc_argument(deployments)

    tokens = sub.add_parser("tokens", help="Show token addresses of a deployed DAO")
    tokens.add_argument("dao", help="DAO address")
    _add_rpc_argument(tokens)

    return parser


def _config_from_args(args: argparse.Namespace) -> DeploymentConfig:
    if args.config:
        return load_config(args.config)

    if args.summoner is None:
        raise ValidationError("Either --config or --summoner is required")
    summoner = parse_address(args.summoner)
    holders = [parse_address(h) for h in args.holder]
    shares = [parse_uint256(s) for s in args.shares]
    salt = parse_bytes32(args.salt) if args.salt else ZERO_SALT

    impl_flags = {
        "--dao-impl": args.dao_impl,
        "--shares-impl": args.shares_impl,
        "--badges-impl": args.badges_impl,
        "--loot-impl": args.loot_impl,
    }
    missing = [flag for flag, value in impl_flags.items() if value is None]
    if missing and len(missing) < len(impl_flags):
        raise ValidationError(
            f"Implementation flags must be given together; missing {', '.join(missing)}"
        )
    if not missing:
        return DeploymentConfig(
            summoner=summoner,
            dao_implementation=parse_address(args.dao_impl),
            shares_implementation=parse_address(args.shares_impl),
            badges_implementation=parse_address(args.badges_impl),
            loot_implementation=parse_address(args.loot_impl),
            init_holders=tuple(holders),
            init_shares=tuple(shares),
            custom_salt=salt,
        )

    registry = _web3_registry(args.rpc_url)
    implementations = registry.get_implementations(summoner)
    logger.info("Fetched implementations for summoner %s", to_checksum_address(summoner))
    return DeploymentConfig.with_implementations(implementations, holders, shares, salt)


def cmd_predict(args: argparse.Namespace) -> None:
    config = _config_from_args(args)
    predicted = predict_all_addresses(config)
    result = predicted.to_dict()

    if args.json:
        print(json.dumps(result, indent=2))
        return

    print(f"Summoner: {to_checksum_address(config.summoner)}")
    print(f"Moloch:   {result['moloch']}")
    print(f"Shares:   {result['shares']}")
    print(f"Badges:   {result['badges']}")
    print(f"Loot:     {result['loot']}")


def cmd_implementations(args: argparse.Namespace) -> None:
    registry = _web3_registry(args.rpc_url)
    implementations = registry.get_implementations(parse_address(args.summoner))
    print(json.dumps(implementations.to_json(), indent=2))


def cmd_deployments(args: argparse.Namespace) -> None:
    registry = _web3_registry(args.rpc_url)
    summoner = parse_address(args.summoner)
    implementations = registry.get_implementations(summoner)
    records = registry.get_deployments(summoner, args.from_block)

    print(f"Summoner: {to_checksum_address(implementations.summoner)}")
    print(f"Moloch Implementation: {to_checksum_address(implementations.dao)}")
    print(f"Shares Implementation: {to_checksum_address(implementations.shares)}")
    print(f"Badges Implementation: {to_checksum_address(implementations.badges)}")
    print(f"Loot Implementation: {to_checksum_address(implementations.loot)}")
    print()
    print(f"Found {len(records)} deployed DAOs:")
    for record in records:
        print()
        print(f"DAO #{record.index}:")
        print(f"  Address: {to_checksum_address(record.dao)}")
        print(f"  Summoned by: {to_checksum_address(record.summoner)}")
        print(f"  Block: {record.block_number}")
        print(f"  Tx: 0x{record.transaction_hash.hex()}")


def cmd_tokens(args: argparse.Namespace) -> None:
    registry = _web3_registry(args.rpc_url)
    tokens = registry.get_dao_tokens(parse_address(args.dao))

    print(f"DAO: {tokens.name} ({tokens.symbol})")
    print(f"Address: {to_checksum_address(tokens.dao)}")
    print(f"Shares Token: {to_checksum_address(tokens.shares)}")
    print(f"Badges Token: {to_checksum_address(tokens.badges)}")
    print(f"Loot Token: {to_checksum_address(tokens.loot)}")


COMMANDS = {
    "predict": cmd_predict,
    "implementations": cmd_implementations,
    "deployments": cmd_deployments,
    "tokens": cmd_tokens,
}


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        COMMANDS[args.command](args)
    except (ValidationError, EncodingError) as e:
        logger.error("%s", e)
        return 1
    except (LookupError, OSError, Web3Exception) as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
