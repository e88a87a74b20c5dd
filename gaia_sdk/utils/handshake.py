"""Handshake line announcing the listener to the launching orchestrator."""

import sys
from typing import Optional, TextIO

from ..config.settings import PluginConfig


def format_handshake(config: PluginConfig, port: int) -> str:
    """
    Build the handshake line.
    
    Format: CORE-PROTOCOL-VERSION|APP-PROTOCOL-VERSION|NETWORK|HOST:PORT|PROTOCOL
    """
    return (
        f"{config.core_protocol_version}|{config.protocol_version}|"
        f"{config.network_type}|{config.listen_address}:{port}|{config.protocol_type}"
    )


def announce(config: PluginConfig, port: int, stream: Optional[TextIO] = None) -> str:
    """Write the handshake line to stdout (or the given stream) and flush it."""
    stream = stream or sys.stdout
    line = format_handshake(config, port)
    stream.write(line + "\n")
    stream.flush()
    return line
