"""Value types for deployment inputs, predictions and registry lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from eth_utils import to_checksum_address

from .constants import ADDRESS_LENGTH, HASH_LENGTH, ZERO_SALT
from .encoding import parse_address, parse_bytes32, parse_uint256
from .errors import ValidationError


def format_address(address: bytes, checksum: bool = True) -> str:
    if checksum:
        return to_checksum_address(address)
    return "0x" + address.hex()


@dataclass(frozen=True)
class DeploymentConfig:
    """
    Everything needed to predict a summoner deployment.

    ``init_holders`` and ``init_shares`` are parallel, ordered sequences.
    ``custom_salt`` defaults to 32 zero bytes, which is what the summoner
    uses when no salt is supplied.
    """

    summoner: bytes
    dao_implementation: bytes
    shares_implementation: bytes
    badges_implementation: bytes
    loot_implementation: bytes
    init_holders: tuple[bytes, ...] = ()
    init_shares: tuple[int, ...] = ()
    custom_salt: bytes = ZERO_SALT

    def __post_init__(self) -> None:
        for name in (
            "summoner",
            "dao_implementation",
            "shares_implementation",
            "badges_implementation",
            "loot_implementation",
        ):
            value = getattr(self, name)
            if len(value) != ADDRESS_LENGTH:
                raise ValidationError(f"{name} must be 20 bytes, got {len(value)}")
        if self.custom_salt is None:
            object.__setattr__(self, "custom_salt", ZERO_SALT)
        elif len(self.custom_salt) != HASH_LENGTH:
            raise ValidationError(f"custom_salt must be 32 bytes, got {len(self.custom_salt)}")
        for holder in self.init_holders:
            if not isinstance(holder, (bytes, bytearray)) or len(holder) != ADDRESS_LENGTH:
                raise ValidationError(
                    f"init_holders entries must be 20-byte addresses, got {holder!r}"
                )
        object.__setattr__(self, "init_holders", tuple(bytes(h) for h in self.init_holders))
        object.__setattr__(self, "init_shares", tuple(self.init_shares))

    @classmethod
    def from_hex(
        cls,
        summoner: str,
        dao_implementation: str,
        shares_implementation: str,
        badges_implementation: str,
        loot_implementation: str,
        init_holders: Sequence[str] = (),
        init_shares: Sequence[str | int] = (),
        custom_salt: Optional[str] = None,
    ) -> "DeploymentConfig":
        """Build a config from textual inputs, canonicalising every value."""
        return cls(
            summoner=parse_address(summoner),
            dao_implementation=parse_address(dao_implementation),
            shares_implementation=parse_address(shares_implementation),
            badges_implementation=parse_address(badges_implementation),
            loot_implementation=parse_address(loot_implementation),
            init_holders=tuple(parse_address(h) for h in init_holders),
            init_shares=tuple(parse_uint256(s) for s in init_shares),
            custom_salt=parse_bytes32(custom_salt) if custom_salt is not None else ZERO_SALT,
        )

    @classmethod
    def with_implementations(
        cls,
        implementations: "Implementations",
        init_holders: Sequence[bytes] = (),
        init_shares: Sequence[int] = (),
        custom_salt: bytes = ZERO_SALT,
    ) -> "DeploymentConfig":
        return cls(
            summoner=implementations.summoner,
            dao_implementation=implementations.dao,
            shares_implementation=implementations.shares,
            badges_implementation=implementations.badges,
            loot_implementation=implementations.loot,
            init_holders=tuple(init_holders),
            init_shares=tuple(init_shares),
            custom_salt=custom_salt,
        )


@dataclass(frozen=True)
class PredictedAddresses:
    dao: bytes
    shares: bytes
    badges: bytes
    loot: bytes

    def to_dict(self, checksum: bool = True) -> dict[str, str]:
        return {
            "moloch": format_address(self.dao, checksum),
            "shares": format_address(self.shares, checksum),
            "badges": format_address(self.badges, checksum),
            "loot": format_address(self.loot, checksum),
        }


@dataclass(frozen=True)
class Implementations:
    """Implementation addresses behind a summoner's proxies."""

    summoner: bytes
    dao: bytes
    shares: bytes
    badges: bytes
    loot: bytes

    def to_json(self) -> dict[str, str]:
        """Render as the config document accepted by ``predictor.config``."""
        return {
            "summonerAddress": format_address(self.summoner),
            "molochImplementation": format_address(self.dao),
            "sharesImplementation": format_address(self.shares),
            "badgesImplementation": format_address(self.badges),
            "lootImplementation": format_address(self.loot),
        }


@dataclass(frozen=True)
class DeploymentRecord:
    """One ``NewDAO`` event emitted by a summoner."""

    index: int
    summoner: bytes
    dao: bytes
    block_number: int
    transaction_hash: bytes


@dataclass(frozen=True)
class DaoTokens:
    dao: bytes
    name: str
    symbol: str
    shares: bytes
    badges: bytes
    loot: bytes
