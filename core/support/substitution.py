"""Strict parameter-to-placeholder reconciliation."""

from __future__ import annotations

import logging

from core.support.models import SubstitutionEntry, SubstitutionReport
from core.support.parameters import ParameterSet
from core.support.template import ReasonTemplate
from core.utils.errors import UnusedParameterError
from core.utils.events import log_event


def apply_parameters(template: ReasonTemplate, parameters: ParameterSet) -> SubstitutionReport:
    """Apply parameters in order, failing on the first unused one.

    Every parameter must match at least one placeholder. Placeholders left
    without a parameter are not an error; they are reported in
    ``SubstitutionReport.unresolved`` and logged as a warning.

    Raises:
        UnusedParameterError: a parameter's token is not in the template.
    """

    entries: list[SubstitutionEntry] = []
    for parameter in parameters:
        if not template.contains_placeholder(parameter.token):
            raise UnusedParameterError(parameter.name, value=parameter.value)
        replaced_count = template.replace(parameter.token, parameter.value)
        entries.append(
            SubstitutionEntry(
                name=parameter.name,
                token=parameter.token,
                replaced_count=replaced_count,
            )
        )

    unresolved = template.find_placeholders()
    if unresolved:
        log_event(logging.WARNING, "unresolved_placeholders", placeholders=unresolved)

    return SubstitutionReport(entries=entries, unresolved=unresolved)
