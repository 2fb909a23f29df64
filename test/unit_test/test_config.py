"""
Test Config Module

Tests for environment-driven configuration and logging setup.
"""

import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))


def test_jupiter_config_defaults():
    from jup_ag_sdk.config import DEFAULT_BASE_URL, JupiterConfig, TradingConfig

    print("Testing JupiterConfig defaults...")

    env = {k: v for k, v in os.environ.items()
           if k not in ("JUPITER_BASE_URL", "JUPITER_API_KEY", "JUPITER_TIMEOUT", "DEFAULT_SLIPPAGE_BPS")}
    with patch.dict(os.environ, env, clear=True):
        jupiter = JupiterConfig()
        assert jupiter.base_url == DEFAULT_BASE_URL == "https://lite-api.jup.ag"
        assert jupiter.api_key is None
        assert jupiter.timeout == 30.0
        assert TradingConfig().default_slippage_bps == 50

    print("  JupiterConfig defaults: PASSED")


def test_config_from_env():
    from jup_ag_sdk.config import Config

    print("Testing Config from env...")

    env = {
        "JUPITER_BASE_URL": "https://api.jup.ag",
        "JUPITER_API_KEY": "key-123",
        "JUPITER_TIMEOUT": "5",
        "SOLANA_RPC_URL": "https://rpc.example.com",
        "RPC_COMMITMENT": "finalized",
        "TX_CONFIRMATION_TIMEOUT": "90",
        "TX_POLL_INTERVAL": "0.5",
        "TX_SKIP_PREFLIGHT": "yes",
        "DEFAULT_SLIPPAGE_BPS": "100",
        "LOG_LEVEL": "debug",
    }
    with patch.dict(os.environ, env):
        cfg = Config()

    assert cfg.jupiter.base_url == "https://api.jup.ag"
    assert cfg.jupiter.api_key == "key-123"
    assert cfg.jupiter.timeout == 5.0
    assert cfg.rpc.url == "https://rpc.example.com"
    assert cfg.rpc.commitment == "finalized"
    assert cfg.tx.confirmation_timeout == 90.0
    assert cfg.tx.poll_interval == 0.5
    assert cfg.tx.skip_preflight is True
    assert cfg.trading.default_slippage_bps == 100
    assert cfg.logging.level == logging.DEBUG

    print("  Config from env: PASSED")


def test_invalid_numbers_fall_back():
    from jup_ag_sdk.config import Config

    print("Testing invalid numeric values...")

    with patch.dict(os.environ, {"JUPITER_TIMEOUT": "soon", "DEFAULT_SLIPPAGE_BPS": "1.5"}):
        cfg = Config()

    assert cfg.jupiter.timeout == 30.0
    assert cfg.trading.default_slippage_bps == 50

    print("  Invalid numeric values: PASSED")


def test_reload_config_in_place():
    """Modules holding the global config see reloaded values"""
    import jup_ag_sdk.config as config_module
    from jup_ag_sdk.client import JupiterClient

    print("Testing reload_config...")

    original = config_module.config
    saved = config_module.config.jupiter
    try:
        with patch.dict(os.environ, {"JUPITER_BASE_URL": "https://example.invalid/"}):
            reloaded = config_module.reload_config()
        assert reloaded is original
        assert JupiterClient().base_url == "https://example.invalid"
    finally:
        config_module.config.jupiter = saved

    print("  reload_config: PASSED")


def test_package_keeps_config_module():
    """jup_ag_sdk.config stays the module, not the global Config instance"""
    import jup_ag_sdk
    import jup_ag_sdk.config as config_module
    from jup_ag_sdk.config import Config

    print("Testing jup_ag_sdk.config attribute...")

    assert hasattr(config_module, "reload_config")
    assert isinstance(config_module.config, Config)
    assert jup_ag_sdk.config is config_module

    print("  jup_ag_sdk.config attribute: PASSED")


def test_setup_logging(tmp_path):
    from jup_ag_sdk.config import LoggingConfig, setup_logging

    print("Testing setup_logging...")

    log_file = tmp_path / "logs" / "jupiter.log"
    logger = setup_logging(
        LoggingConfig(log_file=str(log_file), log_level="DEBUG", console_output=False),
        logger_name="jup_ag_sdk.test_setup_logging",
    )

    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        logger.debug("hello")
        for handler in logger.handlers:
            handler.flush()
        assert log_file.exists()
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    print("  setup_logging: PASSED")
