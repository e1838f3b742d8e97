"""Tests for loading deployment config documents."""

import json

import pytest

from predictor.config import config_from_dict, load_config
from predictor.core.constants import ZERO_SALT
from predictor.core.errors import ValidationError
from predictor.core.types import Implementations
from tests.fixtures.addresses import HOLDER_1


class TestConfigFromDict:

    def test_golden(self, golden_config_json, golden_config):
        assert config_from_dict(golden_config_json) == golden_config

    def test_custom_salt_optional(self, golden_config_json):
        data = dict(golden_config_json)
        del data["customSalt"]
        assert config_from_dict(data).custom_salt == ZERO_SALT

    def test_holders_optional(self, golden_config_json):
        data = dict(golden_config_json)
        del data["initHolders"]
        del data["initShares"]

        config = config_from_dict(data)

        assert config.init_holders == ()
        assert config.init_shares == ()

    def test_integer_shares(self, golden_config_json, golden_config):
        data = dict(golden_config_json)
        data["initShares"] = [10**18, 2 * 10**18]
        assert config_from_dict(data) == golden_config

    def test_accepts_implementations_output(self):
        """The document printed by the implementations command is a valid config."""
        impls = Implementations(
            summoner=bytes.fromhex("aa" * 20),
            dao=bytes.fromhex("bb" * 20),
            shares=bytes.fromhex("cc" * 20),
            badges=bytes.fromhex("dd" * 20),
            loot=bytes.fromhex("ee" * 20),
        )
        data = impls.to_json()
        data["initHolders"] = ["0x" + HOLDER_1.hex()]
        data["initShares"] = ["1"]

        config = config_from_dict(data)

        assert config.summoner == impls.summoner
        assert config.dao_implementation == impls.dao
        assert config.init_holders == (HOLDER_1,)

    @pytest.mark.parametrize(
        "key",
        [
            "summonerAddress",
            "molochImplementation",
            "sharesImplementation",
            "badgesImplementation",
            "lootImplementation",
        ],
    )
    def test_missing_key(self, golden_config_json, key):
        data = dict(golden_config_json)
        del data[key]

        with pytest.raises(ValidationError, match=key):
            config_from_dict(data)

    def test_not_an_object(self):
        with pytest.raises(ValidationError):
            config_from_dict(["not", "a", "dict"])

    def test_holders_not_a_list(self, golden_config_json):
        data = dict(golden_config_json)
        data["initHolders"] = "0x1234"
        with pytest.raises(ValidationError, match="must be lists"):
            config_from_dict(data)

    def test_bad_salt(self, golden_config_json):
        data = dict(golden_config_json)
        data["customSalt"] = "0x1234"
        with pytest.raises(ValidationError):
            config_from_dict(data)


class TestLoadConfig:

    def test_load(self, tmp_path, golden_config_json, golden_config):
        path = tmp_path / "deployment.json"
        path.write_text(json.dumps(golden_config_json))

        assert load_config(path) == golden_config
        assert load_config(str(path)) == golden_config

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")
