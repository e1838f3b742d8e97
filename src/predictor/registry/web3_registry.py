"""
JSON-RPC registry backed by web3.py.

Reads the summoner's ``implementation()``, the DAO implementation's token
implementations and the summoner's ``NewDAO`` event log. Every method is
one or a few sequential ``eth_call``/``eth_getLogs`` requests; transport
errors propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Optional

from eth_utils import to_canonical_address, to_checksum_address
from web3 import Web3

from predictor.core.types import DaoTokens, DeploymentRecord
from predictor.registry.base import Registry


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


def _view(name: str, output: str = "address") -> dict:
    return {
        "type": "function",
        "name": name,
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": output}],
    }


SUMMONER_ABI = [
    _view("implementation"),
    {
        "type": "event",
        "name": "NewDAO",
        "anonymous": False,
        "inputs": [
            {"name": "summoner", "type": "address", "indexed": True},
            {"name": "dao", "type": "address", "indexed": True},
        ],
    },
]

DAO_IMPLEMENTATION_ABI = [
    _view("sharesImpl"),
    _view("badgesImpl"),
    _view("lootImpl"),
]

DAO_ABI = [
    _view("shares"),
    _view("badges"),
    _view("loot"),
    _view("name", "string"),
    _view("symbol", "string"),
]


class Web3Registry(Registry):
    def __init__(self, w3: Web3) -> None:
        self.w3 = w3

    @classmethod
    def from_rpc_url(cls, rpc_url: str, timeout: Optional[int] = DEFAULT_TIMEOUT) -> "Web3Registry":
        provider = Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout})
        return cls(Web3(provider))

    def _contract(self, address: bytes, abi: list):
        return self.w3.eth.contract(address=to_checksum_address(address), abi=abi)

    def get_dao_implementation(self, summoner: bytes) -> bytes:
        summoner_contract = self._contract(summoner, SUMMONER_ABI)
        implementation = summoner_contract.functions.implementation().call()
        logger.debug("Summoner %s implementation: %s", to_checksum_address(summoner), implementation)
        return to_canonical_address(implementation)

    def get_token_implementations(self, dao_implementation: bytes) -> tuple[bytes, bytes, bytes]:
        dao = self._contract(dao_implementation, DAO_IMPLEMENTATION_ABI)
        shares = dao.functions.sharesImpl().call()
        badges = dao.functions.badgesImpl().call()
        loot = dao.functions.lootImpl().call()
        logger.debug("Token implementations: shares=%s badges=%s loot=%s", shares, badges, loot)
        return (
            to_canonical_address(shares),
            to_canonical_address(badges),
            to_canonical_address(loot),
        )

    def get_deployments(self, summoner: bytes, from_block: int = 0) -> list[DeploymentRecord]:
        summoner_contract = self._contract(summoner, SUMMONER_ABI)
        events = summoner_contract.events.NewDAO.get_logs(from_block=from_block)
        logger.info("Found %d NewDAO events since block %d", len(events), from_block)
        return [
            DeploymentRecord(
                index=i,
                summoner=to_canonical_address(event["args"]["summoner"]),
                dao=to_canonical_address(event["args"]["dao"]),
                block_number=event["blockNumber"],
                transaction_hash=bytes(event["transactionHash"]),
            )
            for i, event in enumerate(events)
        ]

    def get_dao_tokens(self, dao: bytes) -> DaoTokens:
        """Token addresses of an already deployed DAO."""
        contract = self._contract(dao, DAO_ABI)
        return DaoTokens(
            dao=dao,
            name=contract.functions.name().call(),
            symbol=contract.functions.symbol().call(),
            shares=to_canonical_address(contract.functions.shares().call()),
            badges=to_canonical_address(contract.functions.badges().call()),
            loot=to_canonical_address(contract.functions.loot().call()),
        )
