# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Namespace Helper — Key layout for everything stored in Redis.

Keys are prefixed `revent:` and grouped by resource type:
  revent:registry:config:{tenant}
  revent:views:count:{event_id}
  revent:views:recent:{event_id}
  revent:views:client:{client_id}
"""

from __future__ import annotations

PREFIX = "revent"


def get_key(resource_type: str, kind: str, resource_id: str) -> str:
    """
    Build a namespaced key.

    Examples:
        get_key("registry", "config", "acme") -> "revent:registry:config:acme"
        get_key("views", "count", "42") -> "revent:views:count:42"
    """
    return f"{PREFIX}:{resource_type}:{kind}:{resource_id}"


def registry_config_key(tenant: str) -> str:
    """revent:registry:config:{tenant}"""
    return get_key("registry", "config", tenant)


def view_count_key(event_id: str) -> str:
    """revent:views:count:{event_id}"""
    return get_key("views", "count", event_id)


def recent_view_key(event_id: str) -> str:
    """revent:views:recent:{event_id}, lives for the rate-limit window."""
    return get_key("views", "recent", event_id)


def client_views_key(client_id: str) -> str:
    """revent:views:client:{client_id}, set of event ids the client has viewed."""
    return get_key("views", "client", client_id)
