"""
Token Claim Validation resources.

Token claim validations live below an ID token validator, so they are
imported as ``<id_token_validator_name>/<name>``.
"""

from pingdirectory_provider.models.token_claim_validation import (
    TOKEN_CLAIM_VALIDATION_TYPES,
    TokenClaimValidation,
)
from pingdirectory_provider.resources.base import ConfigResource, DefaultConfigResource


class TokenClaimValidationResource(ConfigResource):
    """Create and manage a Token Claim Validation."""

    type_name = "token_claim_validation"
    display_name = "Token Claim Validation"
    description = "Resource to create and manage a Token Claim Validation."
    model = TokenClaimValidation
    schema_name = "token-claim-validation"
    collection_path = "token-claim-validations"
    parent_attribute = "id_token_validator_name"
    parent_collection_path = "id-token-validators"
    type_options = tuple(TOKEN_CLAIM_VALIDATION_TYPES)
    at_least_one_of = {
        "string-array": [("all_required_value", "any_required_value")],
    }


class DefaultTokenClaimValidationResource(
    TokenClaimValidationResource, DefaultConfigResource
):
    type_name = "default_token_claim_validation"
    description = "Resource to manage a Token Claim Validation that already exists."
