"""
RowCodec: decode rows and encode entities under one configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import structlog

from .config import CodecConfig, load_config
from .encoders import dumps, encode_for_transport
from .rows import decode_organization_row, decode_user_row
from .schemas import Organization, User

log = structlog.get_logger()


class RowCodec:
    """
    Binds a CodecConfig to the row decoders and transport encoders.

    A codec holds no mutable state; logging is left to the host, which may
    pass ``codec.config.logging`` to ``orgdata.logs.configure_logging``.
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()
        self._tz = self.config.tzinfo

    @classmethod
    def from_file(cls, path: str | Path) -> RowCodec:
        """Build a codec from a YAML config file."""
        config = load_config(path)
        log.debug("codec.config_loaded", config_path=str(path), timezone=config.timezone)
        return cls(config)

    def decode_user(self, row: Mapping[str, Any]) -> User:
        return decode_user_row(row, self._tz)

    def decode_organization(self, row: Mapping[str, Any]) -> Organization:
        return decode_organization_row(row, self._tz)

    def encode(self, entity: Any) -> dict[str, Any]:
        return encode_for_transport(entity)

    def dumps(self, entity: Any) -> str:
        return dumps(entity, indent=self.config.json_indent)
