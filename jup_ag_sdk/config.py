"""
Configuration management for the Jupiter SDK

Loads settings from environment variables and .env file.
Includes logging configuration with optional rotating file output.
"""

import os
import logging
from dataclasses import dataclass, field, fields
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://lite-api.jup.ag"


def _load_env_file():
    """Load .env file from the working directory or the project root"""
    for env_file in (Path.cwd() / ".env", Path(__file__).parent.parent / ".env"):
        if env_file.exists():
            load_dotenv(env_file)
            return


# Load .env on module import
_load_env_file()


def _get_env(key: str, default: Optional[str] = "") -> Optional[str]:
    value = os.getenv(key)
    return default if value is None else value


def _get_env_number(key: str, default, cast):
    """Parse a numeric env var; malformed values log a warning and fall back"""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return cast(value)
    except ValueError:
        logging.getLogger(__name__).warning(
            f"Ignoring {key}={value!r}: expected {cast.__name__}, using {default}"
        )
        return default


def _get_env_float(key: str, default: float) -> float:
    return _get_env_number(key, default, float)


def _get_env_int(key: str, default: int) -> int:
    return _get_env_number(key, default, int)


def _get_env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class JupiterConfig:
    """Jupiter HTTP API configuration"""
    base_url: str = field(default_factory=lambda: _get_env("JUPITER_BASE_URL", DEFAULT_BASE_URL))
    # Sent as x-api-key when set (required by api.jup.ag, not by lite-api)
    api_key: Optional[str] = field(default_factory=lambda: _get_env("JUPITER_API_KEY", None))
    timeout: float = field(default_factory=lambda: _get_env_float("JUPITER_TIMEOUT", 30.0))


@dataclass
class RpcConfig:
    """Solana RPC client configuration"""
    url: str = field(default_factory=lambda: _get_env("SOLANA_RPC_URL", ""))
    timeout_seconds: float = field(default_factory=lambda: _get_env_float("RPC_TIMEOUT_SECONDS", 30.0))
    commitment: str = field(default_factory=lambda: _get_env("RPC_COMMITMENT", "confirmed"))


@dataclass
class SignerConfig:
    """Signer configuration for local keypair signing"""
    private_key: Optional[str] = field(default_factory=lambda: _get_env("SOLANA_PRIVATE_KEY", None))
    keypair_path: str = field(default_factory=lambda: _get_env("SOLANA_KEYPAIR_PATH", ""))


@dataclass
class TxConfig:
    """Transaction submission configuration"""
    confirmation_timeout: float = field(default_factory=lambda: _get_env_float("TX_CONFIRMATION_TIMEOUT", 60.0))
    poll_interval: float = field(default_factory=lambda: _get_env_float("TX_POLL_INTERVAL", 1.0))
    skip_preflight: bool = field(default_factory=lambda: _get_env_bool("TX_SKIP_PREFLIGHT", False))
    preflight_commitment: str = field(default_factory=lambda: _get_env("TX_PREFLIGHT_COMMITMENT", "confirmed"))


@dataclass
class TradingConfig:
    """Default trading parameters"""
    default_slippage_bps: int = field(default_factory=lambda: _get_env_int("DEFAULT_SLIPPAGE_BPS", 50))


@dataclass
class LoggingConfig:
    """
    Logging configuration

    Environment variables:
        LOG_FILE: Path to log file (empty disables file output)
        LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
        LOG_FORMAT: Custom log format string
        LOG_CONSOLE: Enable console output (default: true)
        LOG_MAX_BYTES: Max log file size before rotation (default: 10MB)
        LOG_BACKUP_COUNT: Number of backup files to keep (default: 5)
    """
    log_file: str = field(default_factory=lambda: _get_env("LOG_FILE", ""))
    log_level: str = field(default_factory=lambda: _get_env("LOG_LEVEL", "INFO"))
    log_format: str = field(default_factory=lambda: _get_env(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))
    console_output: bool = field(default_factory=lambda: _get_env_bool("LOG_CONSOLE", True))
    max_bytes: int = field(default_factory=lambda: _get_env_int("LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB
    backup_count: int = field(default_factory=lambda: _get_env_int("LOG_BACKUP_COUNT", 5))

    @property
    def level(self) -> int:
        """Get numeric log level"""
        return getattr(logging, self.log_level.upper(), logging.INFO)


@dataclass
class Config:
    """
    Main configuration container

    Loads all settings from environment variables and .env file.

    Usage:
        from jup_ag_sdk.config import config

        print(config.jupiter.base_url)
        print(config.rpc.url)
    """
    jupiter: JupiterConfig = field(default_factory=JupiterConfig)
    rpc: RpcConfig = field(default_factory=RpcConfig)
    signer: SignerConfig = field(default_factory=SignerConfig)
    tx: TxConfig = field(default_factory=TxConfig)
    trading: TradingConfig = field(default_factory=TradingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def reload(cls) -> "Config":
        """Reload configuration from environment"""
        _load_env_file()
        return cls()


# Global config instance
config = Config()


def get_config() -> Config:
    """Get global configuration instance"""
    return config


def reload_config() -> Config:
    """
    Reload configuration from environment

    Sections are replaced on the existing instance so modules holding a
    reference to the global config see the new values.
    """
    fresh = Config.reload()
    for section in fields(fresh):
        setattr(config, section.name, getattr(fresh, section.name))
    return config


def _build_handlers(log_config: LoggingConfig) -> List[logging.Handler]:
    """File handler (rotating) and/or stderr handler, sharing one formatter"""
    formatter = logging.Formatter(log_config.log_format)
    handlers: List[logging.Handler] = []

    if log_config.log_file:
        log_path = Path(log_config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_path,
            maxBytes=log_config.max_bytes,
            backupCount=log_config.backup_count,
            encoding="utf-8",
        ))

    if log_config.console_output:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setLevel(log_config.level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    log_config: Optional[LoggingConfig] = None,
    logger_name: str = "jup_ag_sdk",
) -> logging.Logger:
    """
    Configure the SDK logger

    Replaces any handlers previously attached to ``logger_name``, so it is
    safe to call more than once.

    Args:
        log_config: Logging settings (global config.logging if None)
        logger_name: Logger to configure; child module loggers propagate to it

    Example:
        from jup_ag_sdk.config import LoggingConfig, setup_logging
        logger = setup_logging(LoggingConfig(log_file="jupiter.log", log_level="DEBUG"))
    """
    log_config = log_config or config.logging

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_config.level)

    # Release file handles held by a previous setup
    for old_handler in list(logger.handlers):
        old_handler.close()
        logger.removeHandler(old_handler)

    for handler in _build_handlers(log_config):
        logger.addHandler(handler)

    if log_config.log_file:
        logger.info(f"Logging to {log_config.log_file} at {log_config.log_level}")
    return logger


def enable_file_logging(log_file: str, level: str = "INFO", console: bool = True) -> logging.Logger:
    """Shortcut for setup_logging with a log file, e.g. enable_file_logging("logs/jupiter.log")"""
    return setup_logging(LoggingConfig(log_file=log_file, log_level=level, console_output=console))
