"""Composition of the limited support POST request."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from core.support.connection import SupportConnection, SupportRequest
from core.support.template import ReasonTemplate
from core.utils.errors import InvalidClusterKeyError, RequestBuildError

CLUSTERS_API_PREFIX = "/api/clusters_mgmt/v1/clusters/"
LIMITED_SUPPORT_SUFFIX = "/limited_support_reasons"

_CLUSTER_KEY_RE = re.compile(r"[A-Za-z0-9_-]+")


def validate_cluster_key(cluster_key: str) -> None:
    """Reject cluster keys that could alter the API path or query."""

    if not _CLUSTER_KEY_RE.fullmatch(cluster_key):
        raise InvalidClusterKeyError(
            f"Cluster key '{cluster_key}' isn't valid: it must contain only "
            "letters, digits, dashes and underscores",
            cluster_key=cluster_key,
        )


def build_reason_path(cluster_id: str) -> str:
    path = CLUSTERS_API_PREFIX + cluster_id + LIMITED_SUPPORT_SUFFIX
    parts = urlsplit(path)
    if (
        not cluster_id
        or parts.scheme
        or parts.netloc
        or parts.query
        or parts.fragment
        or any(char.isspace() for char in path)
    ):
        raise RequestBuildError(f"cannot parse API path '{path}'")
    return path


def compose_request(
    connection: SupportConnection, cluster_id: str, template: ReasonTemplate
) -> SupportRequest:
    """Attach the reason path and serialized template to a new POST request."""

    path = build_reason_path(cluster_id)
    try:
        body = template.serialize()
    except (TypeError, ValueError) as exc:
        raise RequestBuildError(f"cannot marshal template to json: {exc}") from exc

    return connection.post().path(path).body(body)
