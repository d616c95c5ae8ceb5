"""
Generic HTTP response wrapper.

Provides consistent interface regardless of underlying HTTP library.
"""
import json as _json
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class HttpResponse:
    """Raw response returned by every HTTP client."""
    status_code: int
    text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    url: str = ""

    def json(self) -> Any:
        """Parse the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        return _json.loads(self.text)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
