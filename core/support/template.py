"""In-memory limited support reason template.

Placeholders are ``${NAME}`` tokens embedded in the textual fields
(``summary`` and ``details``). Matching is a literal substring search; the
placeholder grammar only matters for discovery.
"""

from __future__ import annotations

import json
import re

from pydantic import ValidationError

from core.support.models import LimitedSupportReason
from core.utils.errors import InvalidTemplateError

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")
_TEXT_FIELDS = ("summary", "details")


class ReasonTemplate:
    """Mutable reason document that substitution operates on."""

    def __init__(self, reason: LimitedSupportReason) -> None:
        self._reason = reason

    @classmethod
    def parse(cls, raw: bytes) -> ReasonTemplate:
        """Load a template from JSON bytes.

        Raises:
            InvalidTemplateError: malformed JSON or a document that does not
                match the limited support reason schema.
        """

        try:
            reason = LimitedSupportReason.model_validate_json(raw)
        except ValidationError as exc:
            raise InvalidTemplateError(f"Cannot parse the JSON template: {exc}") from exc
        return cls(reason)

    @property
    def reason(self) -> LimitedSupportReason:
        return self._reason

    def contains_placeholder(self, token: str) -> bool:
        return any(token in text for text in self._texts())

    def replace(self, token: str, value: str) -> int:
        """Replace every occurrence of ``token`` in the textual fields.

        Returns the number of replaced occurrences.
        """

        replaced = 0
        for field_name in _TEXT_FIELDS:
            text = getattr(self._reason, field_name)
            if text is None:
                continue
            count = text.count(token)
            if count == 0:
                continue
            setattr(self._reason, field_name, text.replace(token, value))
            replaced += count
        return replaced

    def find_placeholders(self) -> list[str]:
        """Return placeholder tokens still present, in first-seen order."""

        tokens: list[str] = []
        seen: set[str] = set()
        for text in self._texts():
            for match in _PLACEHOLDER_RE.finditer(text):
                token = match.group(0)
                if token not in seen:
                    tokens.append(token)
                    seen.add(token)
        return tokens

    def to_payload(self) -> dict[str, object]:
        return self._reason.model_dump(mode="json", exclude_unset=True)

    def serialize(self) -> bytes:
        """Serialize to compact JSON, keeping only fields present in the input."""

        return json.dumps(
            self.to_payload(), ensure_ascii=False, separators=(",", ":")
        ).encode("utf-8")

    def _texts(self) -> list[str]:
        texts: list[str] = []
        for field_name in _TEXT_FIELDS:
            text = getattr(self._reason, field_name)
            if text is not None:
                texts.append(text)
        return texts
