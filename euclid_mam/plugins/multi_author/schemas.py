"""
Contributor form parsing and stored-value handling.
"""

import re
from enum import Enum
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from euclid_mam.logging_config import get_logger

logger = get_logger(__name__)

META_KEY = "contributors"
FIELD_NAME = "contributors[]"
NONCE_FIELD = "mam_nonce"
NONCE_ACTION = "euclid-mam.php"

_INTEGER = re.compile(r"^-?\d+$")


class SaveOutcome(str, Enum):
    """What a save request did to the stored contributors."""
    SAVED = "saved"
    DELETED = "deleted"
    AUTOSAVE = "autosave"
    REVISION = "revision"
    INVALID_NONCE = "invalid_nonce"
    MALFORMED = "malformed"

    @property
    def changed_state(self) -> bool:
        return self in (SaveOutcome.SAVED, SaveOutcome.DELETED)


class ContributorSubmission(BaseModel):
    """
    Contributor selection posted from the edit screen.

    `contributors` keeps the submitted order and duplicates. `malformed` is
    set when an entry is not an integer; such a submission is never stored.
    """

    contributors: List[int] = Field(default_factory=list)
    nonce: Optional[str] = None
    malformed: bool = False

    @field_validator("contributors", mode="before")
    @classmethod
    def integer_literals(cls, v: Any) -> List[int]:
        if v is None:
            return []
        if isinstance(v, (str, int)):
            v = [v]
        ids = []
        for item in v:
            if isinstance(item, bool):
                raise ValueError("Contributor ids must be integers")
            if isinstance(item, int):
                ids.append(item)
            elif isinstance(item, str) and _INTEGER.match(item.strip()):
                ids.append(int(item.strip()))
            else:
                raise ValueError(f"Contributor id is not an integer: {item!r}")
        return ids


def _getlist(form: Mapping[str, Any], name: str) -> List[Any]:
    if hasattr(form, "getlist"):
        return list(form.getlist(name))
    value = form.get(name)
    if value is None:
        return []
    return list(value) if isinstance(value, (list, tuple)) else [value]


def parse_submission(form: Mapping[str, Any]) -> ContributorSubmission:
    """
    Read the contributor fields out of a submitted form.

    Accepts starlette FormData (repeated `contributors[]` entries) or a
    plain mapping of field name to value or list of values.
    """
    nonce_values = _getlist(form, NONCE_FIELD)
    nonce = str(nonce_values[0]) if nonce_values else None
    raw = _getlist(form, FIELD_NAME)

    try:
        return ContributorSubmission(contributors=raw, nonce=nonce)
    except ValidationError as e:
        logger.warning(
            "Malformed contributor submission",
            extra={"errors": [err["msg"] for err in e.errors()]},
        )
        return ContributorSubmission(nonce=nonce, malformed=True)


def read_contributors(value: Any, post_id: Optional[int] = None) -> List[Any]:
    """Stored contributor ids; anything that is not a list counts as none."""
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning(
            "Ignoring malformed contributors metadata",
            extra={"post_id": post_id, "value_type": type(value).__name__},
        )
        return []
    return value
