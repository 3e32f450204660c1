"""Orchestration pipeline for posting limited support reasons."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from core.support.classifier import classify_response
from core.support.connection import SupportConnection
from core.support.models import ClassifiedResponse, SubstitutionReport
from core.support.parameters import ParameterSet
from core.support.request import compose_request, validate_cluster_key
from core.support.substitution import apply_parameters
from core.support.template import ReasonTemplate
from core.utils.events import log_event


@dataclass
class PreparedPost:
    """A fully substituted reason ready to be sent to one cluster."""

    cluster_id: str
    template: ReasonTemplate
    parameters: ParameterSet
    substitution: SubstitutionReport


def prepare_post(
    template_bytes: bytes,
    raw_params: Sequence[str],
    cluster_id: str,
) -> PreparedPost:
    """Execute template parse -> parameter parse -> cluster key check -> substitution.

    Nothing here touches the network; any failure aborts before a request exists.
    """

    template = ReasonTemplate.parse(template_bytes)
    parameters = ParameterSet.parse(raw_params)
    validate_cluster_key(cluster_id)
    substitution = apply_parameters(template, parameters)

    log_event(
        logging.INFO,
        "prepared",
        cluster_id=cluster_id,
        parameters=parameters.names(),
        replaced_count=substitution.replaced_count,
        unresolved=substitution.unresolved,
    )
    return PreparedPost(
        cluster_id=cluster_id,
        template=template,
        parameters=parameters,
        substitution=substitution,
    )


def send_post(connection: SupportConnection, prepared: PreparedPost) -> ClassifiedResponse:
    """Execute compose -> send -> classify for a prepared reason."""

    request = compose_request(connection, prepared.cluster_id, prepared.template)
    response = request.send()
    log_event(
        logging.INFO,
        "sent",
        cluster_id=prepared.cluster_id,
        status=response.status,
    )

    classified = classify_response(response.status, response.body)
    log_event(
        logging.INFO if classified.outcome == "success" else logging.ERROR,
        "classified",
        cluster_id=prepared.cluster_id,
        outcome=classified.outcome,
        status=classified.status,
    )
    return classified
