"""API dependencies."""

from fastapi import Request

from ..services.plugin_service import PluginService


def get_plugin_service(request: Request) -> PluginService:
    """Get the plugin service attached to the running application."""
    return request.app.state.plugin_service
