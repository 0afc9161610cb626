"""
AI-policy documents: the llms.txt JSON manifest and the ai.txt text file.

Both render the same PolicyConfig. The JSON form encodes permissions as
booleans (only the exact value 'allow' grants); the text form echoes the raw
values so the file stays human-reviewable.
"""

import json

from .config import POLICY_VERSION, PolicyConfig


def format_number(value: int | float) -> int | float:
    """Drop the fractional part of integral floats (10.0 -> 10)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def is_allowed(permission: str) -> bool:
    return permission == 'allow'


def policy_to_dict(cfg: PolicyConfig) -> dict:
    """Build the llms.txt payload with its fixed key order."""
    return {
        'version': POLICY_VERSION,
        'site_name': cfg.site_name,
        'contact': cfg.contact,
        'models': list(cfg.models),
        'capabilities': list(cfg.capabilities),
        'policy': {
            'allow': list(cfg.allow_paths),
            'disallow': list(cfg.disallow_paths),
        },
        'training': is_allowed(cfg.training),
        'retention': is_allowed(cfg.retention),
        'commercial_use': is_allowed(cfg.commercial_use),
        'rate_limit_rps': format_number(cfg.rate_limit_rps),
    }


def render_policy_json(cfg: PolicyConfig) -> str:
    """Render /.well-known/llms.txt (a JSON document despite the name)."""
    return json.dumps(policy_to_dict(cfg), indent=2, ensure_ascii=False) + '\n'


def render_policy_text(cfg: PolicyConfig) -> str:
    """Render /ai.txt."""
    lines = [
        f"# ai.txt for {cfg.site_name}",
        f"# Base: {cfg.base_url}",
        f"# Contact: {cfg.contact}",
        f"# Models: {', '.join(cfg.models)}",
        f"# Capabilities: {', '.join(cfg.capabilities)}",
        '',
        'User-agent: *',
    ]
    lines.extend(f"Allow: {path}" for path in cfg.allow_paths)
    lines.extend(f"Disallow: {path}" for path in cfg.disallow_paths)
    lines.extend([
        '',
        f"Training: {cfg.training}",
        f"Retention: {cfg.retention}",
        f"Commercial-Use: {cfg.commercial_use}",
        f"Rate-Limit-RPS: {format_number(cfg.rate_limit_rps)}",
        '',
    ])
    return '\n'.join(lines)
