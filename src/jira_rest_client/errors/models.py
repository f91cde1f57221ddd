"""Jira error body model."""

from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass
class ServiceErrors:
    """Error body Jira returns with 4xx responses.

    Example body::

        {"errorMessages": ["bad query"], "errors": {"summary": "required"}}
    """

    error_messages: list[str] = field(default_factory=list)  # free-text messages
    errors: dict[str, str] = field(default_factory=dict)  # field name -> message

    @classmethod
    def from_dict(cls, data: Any) -> "ServiceErrors":
        """Build from a decoded JSON object.

        Raises:
            TypeError: If ``data`` is not a JSON object or its members have
                the wrong shape.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        messages = data.get("errorMessages") or []
        errors = data.get("errors") or {}
        if not isinstance(messages, list) or not isinstance(errors, dict):
            raise TypeError("errorMessages must be a list and errors an object")

        return cls(
            error_messages=[str(m) for m in messages],
            errors={str(k): str(v) for k, v in errors.items()},
        )

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ServiceErrors":
        """Parse the error body of an HTTP response.

        Raises:
            ValueError: If the body is not JSON.
            TypeError: If the JSON does not have the expected shape.
        """
        return cls.from_dict(response.json())

    def to_dict(self) -> dict[str, Any]:
        return {"errorMessages": list(self.error_messages), "errors": dict(self.errors)}

    def to_exception_message(self) -> str:
        """Render every message and field error, one per line."""
        lines = []

        for message in self.error_messages:
            lines.append(message)

        if self.errors:
            lines.append("Field errors:")
            for key, value in self.errors.items():
                lines.append(f"  - {key}: {value}")

        return "\n".join(lines) if lines else "No error details returned"
