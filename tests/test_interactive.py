"""Interactive wizard driven by scripted answers."""

import click
import pytest

from hive_feed_setup.wizard.interactive import InteractiveSetup
from hive_feed_setup.wizard.store import EnvStore
from hive_feed_setup.wizard.wallet import WalletStateHook

from conftest import DEFAULT_NODES_TEXT, KEY_A, KEY_B, ScriptedPrompt, backups_of


@pytest.fixture
def wallet_dir(tmp_path):
    path = tmp_path / "storage_root-node" / ".beekeeper"
    path.mkdir(parents=True)
    (path / "wallet.json").write_text("{}")
    return path


def make_setup(store, wallet_dir, answers):
    prompt = ScriptedPrompt(answers)
    return InteractiveSetup(store, WalletStateHook(wallet_dir), prompt=prompt), prompt


def seed(env_path, account="alice", key=KEY_A, interval="10min", nodes=None):
    lines = [f"HIVE_WITNESS_ACCOUNT={account}", f"HIVE_SIGNING_PRIVATE_KEY={key}"]
    if nodes:
        lines.append(f"HIVE_RPC_NODES={nodes}")
    lines.append(f"FEED_INTERVAL={interval}")
    env_path.write_text("\n".join(lines) + "\n")


def test_fresh_setup_writes_store(store, env_path, wallet_dir, capsys):
    setup, prompt = make_setup(store, wallet_dir, ["@alice", KEY_B, "1", "", "Y"])

    assert setup.run() is True

    content = env_path.read_text()
    assert "HIVE_WITNESS_ACCOUNT=alice\n" in content
    assert f"HIVE_SIGNING_PRIVATE_KEY={KEY_B}\n" in content
    assert "FEED_INTERVAL=3min\n" in content
    assert f"HIVE_RPC_NODES={DEFAULT_NODES_TEXT}\n" in content

    out = capsys.readouterr().out
    assert "5JbV...Xu8e" in out
    assert KEY_B not in out
    assert "Setup Complete!" in out
    # No prior key, so no wallet question
    assert len(prompt.prompts) == 5
    assert wallet_dir.exists()
    assert backups_of(env_path) == []


def test_signing_key_prompt_hides_input(store, wallet_dir):
    setup, prompt = make_setup(store, wallet_dir, ["alice", KEY_B, "", "", ""])

    setup.run()

    assert prompt.hidden == [False, True, False, False, False]


def test_rejected_input_is_asked_again(store, env_path, wallet_dir, capsys):
    setup, prompt = make_setup(
        store, wallet_dir, ["", "Bad_Name", "alice", "short", KEY_B, "7", "2", "", ""]
    )

    assert setup.run() is True

    captured = capsys.readouterr()
    assert "Witness account is required." in captured.err
    assert "Invalid account name" in captured.err
    assert "Invalid key format" in captured.err
    assert "Invalid choice. Please select 1-5." in captured.err
    assert "FEED_INTERVAL=10min\n" in env_path.read_text()
    # Section headers are printed once per step, not once per attempt
    assert captured.out.count("Witness Account\n") == 1


def test_prompts_show_existing_values(store, env_path, wallet_dir):
    seed(env_path, interval="1hour", nodes="https://node.example")
    setup, prompt = make_setup(store, wallet_dir, ["", "", "", "", ""])

    setup.run()

    assert prompt.prompts == [
        "Enter your Hive witness account [alice]",
        "Enter your private key [keep: 5Hue...vyTJ]",
        "Select interval [1-5, default: 4]",
        "RPC nodes [https://node.example]",
        "Save this configuration? [Y/n]",
    ]


def test_keeping_every_default_keeps_values_and_wallet(store, env_path, wallet_dir, capsys):
    seed(env_path, interval="30min", nodes="https://a.example,https://b.example")
    setup, prompt = make_setup(store, wallet_dir, ["", "", "", "", ""])

    assert setup.run() is True

    content = env_path.read_text()
    assert "HIVE_WITNESS_ACCOUNT=alice\n" in content
    assert f"HIVE_SIGNING_PRIVATE_KEY={KEY_A}\n" in content
    assert "FEED_INTERVAL=30min\n" in content
    assert "HIVE_RPC_NODES=https://a.example,https://b.example\n" in content
    assert wallet_dir.exists()
    assert "Private key changed" not in capsys.readouterr().out
    assert len(backups_of(env_path)) == 1


def test_cancel_leaves_store_untouched(store, env_path, wallet_dir, capsys):
    seed(env_path)
    before = env_path.read_bytes()
    setup, _ = make_setup(store, wallet_dir, ["bob", KEY_B, "3", "", "n"])

    assert setup.run() is False

    assert env_path.read_bytes() == before
    assert backups_of(env_path) == []
    assert wallet_dir.exists()
    assert "Configuration cancelled. No changes made." in capsys.readouterr().out


def test_key_change_cleans_wallet_when_confirmed(store, env_path, wallet_dir, capsys):
    seed(env_path)
    setup, prompt = make_setup(store, wallet_dir, ["", KEY_B, "", "", "", ""])

    assert setup.run() is True

    assert not wallet_dir.exists()
    assert prompt.prompts[-1] == "Clean wallet now? [Y/n]"
    out = capsys.readouterr().out
    assert "Private key changed!" in out
    assert "Wallet cleaned" in out
    assert f"HIVE_SIGNING_PRIVATE_KEY={KEY_B}\n" in env_path.read_text()


def test_key_change_declined_keeps_wallet(store, env_path, wallet_dir, capsys):
    seed(env_path)
    setup, _ = make_setup(store, wallet_dir, ["", KEY_B, "", "", "", "n"])

    assert setup.run() is True

    assert wallet_dir.exists()
    assert "Wallet kept." in capsys.readouterr().out


def test_same_key_typed_again_is_not_a_change(store, env_path, wallet_dir):
    seed(env_path)
    setup, prompt = make_setup(store, wallet_dir, ["", KEY_A, "", "", ""])

    setup.run()

    assert wallet_dir.exists()
    assert "Clean wallet now? [Y/n]" not in prompt.prompts


def test_backup_reported(store, env_path, wallet_dir, capsys):
    seed(env_path)
    setup, _ = make_setup(store, wallet_dir, ["", "", "", "", ""])

    setup.run()

    (backup,) = backups_of(env_path)
    assert f"Backed up existing .env to {backup}" in capsys.readouterr().out


def test_interrupt_writes_nothing(store, env_path, wallet_dir):
    seed(env_path)
    before = env_path.read_bytes()
    setup, _ = make_setup(store, wallet_dir, ["bob", click.Abort()])

    with pytest.raises(click.Abort):
        setup.run()

    assert env_path.read_bytes() == before
    assert backups_of(env_path) == []


def test_summary_masks_key(store, wallet_dir, capsys):
    setup, _ = make_setup(store, wallet_dir, ["alice", KEY_B, "5", "https://x.example", "n"])

    setup.run()

    out = capsys.readouterr().out
    assert "Configuration Summary" in out
    assert "Private Key:" in out
    assert "5JbV...Xu8e" in out
    assert KEY_B not in out
    assert "https://x.example" in out
    assert "6hour" in out


def test_existing_store_is_not_created_on_cancel(store, env_path, wallet_dir):
    setup, _ = make_setup(store, wallet_dir, ["alice", KEY_B, "", "", "no"])

    assert setup.run() is False

    assert not env_path.exists()


def test_store_created_without_existing_wallet(tmp_path, wallet_dir):
    env_path = tmp_path / "config" / ".env"
    setup, _ = make_setup(EnvStore(env_path), tmp_path / "missing", ["alice", KEY_A, "", "", ""])

    assert setup.run() is True

    assert env_path.is_file()


def test_menu_digit_lookalikes_are_asked_again(store, env_path, wallet_dir, capsys):
    setup, prompt = make_setup(
        store, wallet_dir, ["alice", KEY_B, "²", "01", "3", ",", "https://a.example", ""]
    )

    assert setup.run() is True

    err = capsys.readouterr().err
    assert err.count("Invalid choice. Please select 1-5.") == 2
    assert "No RPC nodes given." in err
    content = env_path.read_text()
    assert "FEED_INTERVAL=30min\n" in content
    assert "HIVE_RPC_NODES=https://a.example\n" in content
