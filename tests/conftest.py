"""Shared fixtures for hive-feed-setup tests."""

from pathlib import Path

import pytest

from hive_feed_setup.models.record import ConfigurationRecord
from hive_feed_setup.wizard.store import EnvStore

# WIF-shaped keys: "5" + H/J/K + 49 base58 characters
KEY_A = "5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ"
KEY_B = "5JbVhzSegWdPp3n2GuQ6kKWHQb4JxdRtEm1MYk9sCcA7tZqXu8e"
KEY_C = "5KQwrPbwdL6PhXujxW37FSSQZ1JiwsST4cqQzDeyXtP79zkvFD3"

DEFAULT_NODES_TEXT = "https://api.hive.blog,https://api.deathwing.me,https://api.openhive.network"


class ScriptedPrompt:
    """Stands in for the terminal: returns scripted answers, records the prompts"""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.hidden = []

    def __call__(self, text, hide_input=False):
        self.prompts.append(text)
        self.hidden.append(hide_input)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {text}")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's HIVE_FEED_* variables out of the tests"""
    for name in (
        "HIVE_FEED_ENV_FILE",
        "HIVE_FEED_WALLET_DIR",
        "HIVE_FEED_SETUP_LOG",
        "HIVE_FEED_SETUP_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def env_path(tmp_path) -> Path:
    return tmp_path / ".env"


@pytest.fixture
def store(env_path) -> EnvStore:
    return EnvStore(env_path)


@pytest.fixture
def record() -> ConfigurationRecord:
    return ConfigurationRecord(
        witness_account="alice",
        signing_key=KEY_A,
        feed_interval="30min",
        rpc_nodes=["https://api.hive.blog", "https://anyx.io"],
    )


def backups_of(path: Path):
    return sorted(path.parent.glob(f"{path.name}.backup.*"))
