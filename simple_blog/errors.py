"""
Failure results returned by the post repository.

These are returned, not raised. Callers branch on the type of the result.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

BLANK = "can't be blank"
UNKNOWN_ATTRIBUTE = "is not a known attribute"


@dataclass(frozen=True)
class ValidationError:
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def fields(self) -> List[str]:
        return list(self.errors)

    def full_messages(self) -> List[str]:
        # "title" -> "Title can't be blank"
        return [
            f"{name.replace('_', ' ').capitalize()} {message}"
            for name, messages in self.errors.items()
            for message in messages
        ]


@dataclass(frozen=True)
class NotFoundError:
    post_id: Any

    @property
    def message(self) -> str:
        return f"Post {self.post_id} not found"


def is_error(result: object) -> bool:
    return isinstance(result, (ValidationError, NotFoundError))
