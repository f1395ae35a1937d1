"""Publish-readiness checks and asset discovery for page-builder documents."""

from enum import Enum
from typing import Any, Mapping, TypeVar

from fastapi import status

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.modules.publishing.rules import SectionRule

SectionT = TypeVar("SectionT", bound=Enum)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return not value
    return False


def _display_name(section_key: str) -> str:
    return section_key[:1].upper() + section_key[1:]


def find_missing_field(
    config: Mapping[str, Any] | None,
    rules: Mapping[SectionT, SectionRule],
) -> tuple[str, str] | None:
    """First ``(section_key, field)`` that blocks publishing, or None.

    Disabled sections and keys without a rule are skipped.
    """
    if not config:
        return None

    rules_by_key = {section.value: rule for section, rule in rules.items()}
    for section_key, section in config.items():
        if not isinstance(section, Mapping) or section.get("enabled") is not True:
            continue
        rule = rules_by_key.get(section_key)
        if rule is None:
            continue
        props = section.get("props") or {}
        for field_name in rule.required_fields:
            if _is_missing(props.get(field_name)):
                return section_key, field_name
    return None


def validate_page_config(
    config: Mapping[str, Any] | None,
    rules: Mapping[SectionT, SectionRule],
) -> None:
    """Raise a 400 naming the first incomplete enabled section."""
    missing = find_missing_field(config, rules)
    if missing is None:
        return
    section_key, field_name = missing
    raise DonorHubException(
        MessageCode.PUBLISH_VALIDATION_FAILED,
        status.HTTP_400_BAD_REQUEST,
        {"section": section_key, "field": field_name},
        message=(
            f"Cannot publish: The {_display_name(section_key)} section "
            f"is missing a {field_name}."
        ),
    )


def extract_asset_urls(config: Any, base_url: str) -> list[str]:
    """Strings anywhere in ``config`` that point into the asset bucket."""
    if not base_url:
        return []

    found: list[str] = []
    seen: set[str] = set()
    stack = [config]
    while stack:
        node = stack.pop()
        if isinstance(node, str):
            if node.startswith(base_url) and node not in seen:
                seen.add(node)
                found.append(node)
        elif isinstance(node, Mapping):
            stack.extend(reversed(list(node.values())))
        elif isinstance(node, (list, tuple)):
            stack.extend(reversed(node))
    return found
