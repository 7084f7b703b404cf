"""Helpers for canonical URLs (``{base}/{ResourceType}/{id}|{version}``)."""

from __future__ import annotations

VERSION_SEPARATOR = "|"


def canonical_url(canonical_base: str, resource_type: str, resource_id: str) -> str:
    return f"{canonical_base}/{resource_type}/{resource_id}"


def strip_version(url: str) -> str:
    return url.split(VERSION_SEPARATOR, 1)[0]


def get_version(url: str) -> str | None:
    if VERSION_SEPARATOR not in url:
        return None
    version = url.split(VERSION_SEPARATOR, 1)[1]
    return version or None


def get_id(url: str) -> str:
    if not url:
        raise ValueError("Canonical must have a value for id extraction")
    tail = url.rsplit("/", 1)[-1]
    return strip_version(tail)


def get_resource_name(url: str) -> str | None:
    if not url:
        raise ValueError("Canonical must have a value for resource name extraction")
    if "/" not in url:
        return None
    head = strip_version(url).rsplit("/", 1)[0]
    return head.rsplit("/", 1)[-1]
