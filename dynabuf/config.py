# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file.
#   Provides typed config objects to the codecs and pipelines.
#
# CLASSES:
# --------
# - CodecConfig (dataclass)
#     preserving_proto_field_name: bool           (default False)
#     use_integers_for_enums: bool                (default False)
#     always_print_fields_with_no_presence: bool  (default False)
#     ignore_unknown_fields: bool                 (default False)
#
# - LoggingConfig (dataclass)
#     level: str          (default "WARNING")
#
# - DynabufConfig (dataclass)
#     codec: CodecConfig
#     logging: LoggingConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> DynabufConfig
#     Load .env using python-dotenv, construct DynabufConfig and
#     apply its log level to the "dynabuf" logger.
#     Returns the same singleton on repeated calls.
#
# - configure_logging(config) -> None
#     Apply the configured level to the "dynabuf" logger.
#
# USAGE:
# ------
#   from dynabuf.config import get_config
#   config = get_config()
#   print(config.codec.preserving_proto_field_name)
#
# ==============================================

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


TRUE_VARIANTS = {"1", "true", "yes", "on"}


@dataclass
class CodecConfig:
    """Options for the canonical (proto3 JSON) document mapping."""
    preserving_proto_field_name: bool = False
    use_integers_for_enums: bool = False
    always_print_fields_with_no_presence: bool = False
    ignore_unknown_fields: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration for the dynabuf logger."""
    level: str = "WARNING"


@dataclass
class DynabufConfig:
    """Main library configuration."""
    codec: CodecConfig = field(default_factory=CodecConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Singleton instance
_config_instance: Optional[DynabufConfig] = None


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in TRUE_VARIANTS


def get_config() -> DynabufConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        DynabufConfig: Library configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    codec_config = CodecConfig(
        preserving_proto_field_name=_env_flag("DYNABUF_PRESERVE_FIELD_NAMES"),
        use_integers_for_enums=_env_flag("DYNABUF_USE_ENUM_NUMBERS"),
        always_print_fields_with_no_presence=_env_flag("DYNABUF_EMIT_DEFAULTS"),
        ignore_unknown_fields=_env_flag("DYNABUF_IGNORE_UNKNOWN_FIELDS")
    )

    logging_config = LoggingConfig(
        level=os.getenv("DYNABUF_LOG_LEVEL", "WARNING").upper()
    )

    _config_instance = DynabufConfig(
        codec=codec_config,
        logging=logging_config
    )

    # DYNABUF_LOG_LEVEL takes effect on first load
    configure_logging(_config_instance)

    return _config_instance


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None


def configure_logging(config: Optional[DynabufConfig] = None) -> None:
    """Set the level of the "dynabuf" logger. Handlers are left to the application."""
    config = config or get_config()
    level = logging.getLevelName(config.logging.level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.logging.level!r}")
    logging.getLogger("dynabuf").setLevel(level)
