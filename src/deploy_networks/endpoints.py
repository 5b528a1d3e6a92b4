"""RPC endpoint template helpers for deploy-networks library."""

from typing import Optional

PROVIDER_KEY_PLACEHOLDER = "{key}"


def requires_provider_key(template: str) -> bool:
    """
    Check whether an endpoint template needs the RPC-provider key.

    Args:
        template: Static URL or URL containing the ``{key}`` placeholder

    Returns:
        True if the placeholder is present, False for static URLs
    """
    return PROVIDER_KEY_PLACEHOLDER in template


def render_endpoint(template: str, provider_key: Optional[str] = None) -> str:
    """
    Build the final RPC URL from an endpoint template.

    The key is substituted verbatim; braces or percent signs inside it are
    not interpreted.

    Args:
        template: Endpoint template
        provider_key: RPC-provider API key

    Returns:
        RPC URL

    Raises:
        ValueError: If the template needs a key and none was given
    """
    if not requires_provider_key(template):
        return template

    if not provider_key:
        raise ValueError(f"Endpoint template requires a provider key: {template}")

    return template.replace(PROVIDER_KEY_PLACEHOLDER, provider_key)


def mask_endpoint(template: str) -> str:
    """Return a loggable URL with the provider key hidden."""
    if requires_provider_key(template):
        return template.replace(PROVIDER_KEY_PLACEHOLDER, "***")
    return template
