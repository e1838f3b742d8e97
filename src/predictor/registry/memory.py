"""Dict-based registry for tests and offline use."""

from __future__ import annotations

from predictor.core.types import DeploymentRecord
from predictor.registry.base import Registry


class MemoryRegistry(Registry):
    """In-memory registry using Python dicts."""

    def __init__(self) -> None:
        self._dao_impls: dict[bytes, bytes] = {}  # summoner -> dao implementation
        self._token_impls: dict[bytes, tuple[bytes, bytes, bytes]] = {}  # dao impl -> tokens
        self._deployments: dict[bytes, list[tuple[bytes, int, bytes]]] = {}  # summoner -> (dao, block, tx)

    def add_summoner(
        self,
        summoner: bytes,
        dao_implementation: bytes,
        shares_implementation: bytes,
        badges_implementation: bytes,
        loot_implementation: bytes,
    ) -> None:
        self._dao_impls[summoner] = dao_implementation
        self._token_impls[dao_implementation] = (
            shares_implementation,
            badges_implementation,
            loot_implementation,
        )

    def add_deployment(self, summoner: bytes, dao: bytes, block_number: int, tx_hash: bytes) -> None:
        self._deployments.setdefault(summoner, []).append((dao, block_number, tx_hash))

    def get_dao_implementation(self, summoner: bytes) -> bytes:
        try:
            return self._dao_impls[summoner]
        except KeyError:
            raise LookupError(f"Unknown summoner 0x{summoner.hex()}") from None

    def get_token_implementations(self, dao_implementation: bytes) -> tuple[bytes, bytes, bytes]:
        try:
            return self._token_impls[dao_implementation]
        except KeyError:
            raise LookupError(f"Unknown DAO implementation 0x{dao_implementation.hex()}") from None

    def get_deployments(self, summoner: bytes, from_block: int = 0) -> list[DeploymentRecord]:
        entries = sorted(self._deployments.get(summoner, []), key=lambda e: e[1])
        return [
            DeploymentRecord(
                index=i,
                summoner=summoner,
                dao=dao,
                block_number=block_number,
                transaction_hash=tx_hash,
            )
            for i, (dao, block_number, tx_hash) in enumerate(
                e for e in entries if e[1] >= from_block
            )
        ]
