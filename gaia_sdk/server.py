"""
Process bootstrap for a plugin.

serve() validates the job declarations, binds an ephemeral local port,
announces it on stdout and runs the RPC listener until the process is stopped.
"""

import socket
import ssl
from typing import Iterable, Optional

import structlog
import uvicorn
from fastapi import FastAPI

from .app import create_app
from .config.settings import PluginConfig, get_config
from .domain.entities import Job
from .services.job_registry import JobRegistry
from .services.plugin_service import PluginService
from .utils.handshake import announce
from .utils.logging import setup_logging

logger = structlog.get_logger(__name__)


def bind_listener(config: PluginConfig, backlog: int = 128) -> socket.socket:
    """Bind and listen on an ephemeral port at the configured address."""
    family, sock_type, proto, _, address = socket.getaddrinfo(
        config.listen_address, 0, type=socket.SOCK_STREAM
    )[0]
    sock = socket.socket(family, sock_type, proto)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.bind(address)
    sock.listen(backlog)
    return sock


def build_uvicorn_config(app: FastAPI, config: PluginConfig) -> uvicorn.Config:
    """Build the uvicorn configuration, including TLS material when provided."""
    options = {
        "app": app,
        "log_config": None,
        "access_log": False,
        "lifespan": "on",
    }
    if config.tls_enabled:
        options.update(ssl_certfile=config.server_cert, ssl_keyfile=config.server_key)
        if config.mutual_tls:
            options.update(ssl_ca_certs=config.root_ca_cert, ssl_cert_reqs=ssl.CERT_REQUIRED)
    return uvicorn.Config(**options)


def create_plugin_service(jobs: Iterable[Job]) -> PluginService:
    """
    Build the registry and the plugin service around it.

    Raises:
        ConfigurationError: If the job declarations are invalid
    """
    return PluginService(JobRegistry.build(jobs))


def serve(jobs: Iterable[Job], config: Optional[PluginConfig] = None) -> None:
    """
    Validate jobs and serve them until the process is stopped.

    Args:
        jobs: Job declarations in listing order
        config: Plugin configuration (loaded from the environment if omitted)

    Raises:
        ConfigurationError: If jobs or settings are invalid; no port is bound
    """
    config = config or get_config()
    config.validate_tls()
    setup_logging(config.log_level, config.log_format)

    plugin_service = create_plugin_service(jobs)
    app = create_app(plugin_service, config)
    server = uvicorn.Server(build_uvicorn_config(app, config))

    sock = bind_listener(config)
    try:
        port = sock.getsockname()[1]
        logger.info("Plugin listening", address=config.listen_address, port=port, tls=config.tls_enabled)
        announce(config, port)
        server.run(sockets=[sock])
    finally:
        sock.close()
