"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any, Mapping

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "api_key", "apikey", "sc_apikey", "authorization", "token", "secret", "password", "email",
})


class SensitiveFieldsFilter:
    """Mask values whose key names a credential or personal data.

    Keys match case-insensitively. Person records end up in log events next
    to the backend API key header, so ``email`` is masked by default too.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def _is_sensitive(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._fields

    def redact(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Mask top-level keys only."""
        return {k: self.REDACTED if self._is_sensitive(k) else v for k, v in data.items()}

    def redact_deep(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Mask keys at any depth, through nested mappings, lists and tuples."""
        return self._scrub(data)

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {k: self.REDACTED if self._is_sensitive(k) else self._scrub(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._scrub(v) for v in value]
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
