"""
Token Claim Validation model.

Token claim validations are children of an ID token validator and check a
single claim of the ID token.
"""

from pingdirectory_provider.models.base import (
    NamedConfigModel,
    set_attribute,
    string_attribute,
)

TOKEN_CLAIM_VALIDATION_TYPES = ["string-array", "boolean", "string"]


class TokenClaimValidation(NamedConfigModel):
    """Token Claim Validation configuration object."""

    id_token_validator_name: str | None = string_attribute(
        parent=True,
        required=True,
        requires_replace=True,
        description="Name of the parent ID Token Validator",
    )
    required_value: str | None = string_attribute(
        types=["boolean"],
        required_for=["boolean"],
        enum=["true", "false"],
        description="Specifies the boolean claim's required value.",
    )
    all_required_value: set[str] | None = set_attribute(
        types=["string-array"],
        description="The set of all values that the claim must have to be considered valid.",
    )
    any_required_value: set[str] | None = set_attribute(
        types=["string-array", "string"],
        required_for=["string"],
        description="The set of values that the claim may have to be considered valid.",
    )
    description: str | None = string_attribute(
        description="A description for this Token Claim Validation",
    )
    claim_name: str | None = string_attribute(
        required=True,
        description="The name of the claim to be validated.",
    )
