"""Strict base models shared by every genesis configuration object."""

import hashlib
import json

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    A base model that converts field names to camel case when serializing.

    The field `validator_count` is written as `validatorCount`, which is the
    key convention chain specification documents use.

    Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )


class StrictBaseModel(CamelModel):
    """A strict, immutable pydantic base model."""

    model_config = CamelModel.model_config | {
        "extra": "forbid",
        "frozen": True,
        "strict": True,
    }

    def to_canonical_json(self) -> str:
        """
        Serialize to the canonical JSON form.

        Keys are camelCase and sorted, separators carry no whitespace.
        Two nodes holding equal values always produce identical text.
        """
        data = self.model_dump(mode="json", by_alias=True)
        return json.dumps(data, sort_keys=True, separators=(",", ":"))

    def digest(self) -> bytes:
        """BLAKE2b-256 digest of the canonical JSON encoding."""
        return hashlib.blake2b(self.to_canonical_json().encode("utf-8"), digest_size=32).digest()
