"""
Module details tool implementation for Tofu MCP.
"""

from ..clients.registry_client import RegistryClient
from ..config import Config
from ..types import Module, ModuleDetailsRequest


def format_module_details(module: Module) -> str:
    """
    Format module details as markdown.

    Args:
        module: Module data from the registry

    Returns:
        Formatted markdown string
    """
    display = (module.addr and module.addr.display) or "Unknown module"
    version_ids = ", ".join(v.id for v in module.versions or [])
    popularity = module.popularity if module.popularity is not None else 0

    markdown = f"""## Module: {display}

{module.description or "No description"}

**Available Versions**: {version_ids}

**Popularity Score**: {popularity}
"""
    if module.fork_of and module.fork_of.display:
        markdown += f"\n**Forked from**: {module.fork_of.display}\n"
    if module.fork_count:
        markdown += f"\n**Fork count**: {module.fork_count}\n"

    return markdown


async def get_module_details_impl(request: ModuleDetailsRequest, config: Config) -> str:
    """
    Implementation function for the get-module-details tool.

    Raises:
        RequestError: If the module does not exist or the API request fails
    """
    async with RegistryClient(config) as client:
        module = await client.get_module_details(
            request.namespace, request.name, request.target
        )

    return format_module_details(module)
