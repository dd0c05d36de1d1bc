"""
Connection Criteria model.

Connection criteria select client connections, for example to apply a
client connection policy or to restrict a log publisher. Simple criteria
match on properties of the connection itself, aggregate criteria combine
other criteria and third-party criteria delegate to a Java extension.
"""

from pingdirectory_provider.models.base import (
    NamedConfigModel,
    set_attribute,
    string_attribute,
)

CONNECTION_CRITERIA_TYPES = ["simple", "aggregate", "third-party"]

SECURITY_LEVELS = ["any", "secure-only", "insecure-only"]
USER_AUTH_TYPES = ["none", "simple", "sasl", "internal"]

_SIMPLE = ["simple"]
_AGGREGATE = ["aggregate"]
_THIRD_PARTY = ["third-party"]


class ConnectionCriteria(NamedConfigModel):
    """Connection Criteria configuration object."""

    extension_class: str | None = string_attribute(
        types=_THIRD_PARTY,
        required_for=_THIRD_PARTY,
        requires_replace=True,
        description="The fully-qualified name of the Java class providing the logic for the Third Party Connection Criteria.",
    )
    extension_argument: set[str] | None = set_attribute(
        types=_THIRD_PARTY,
        description="The set of arguments used to customize the behavior for the Third Party Connection Criteria. Each configuration property should be given in the form 'name=value'.",
    )
    all_included_connection_criteria: set[str] | None = set_attribute(
        types=_AGGREGATE,
        description="Specifies a connection criteria object that must match the associated client connection in order to match the aggregate connection criteria.",
    )
    any_included_connection_criteria: set[str] | None = set_attribute(
        types=_AGGREGATE,
        description="Specifies a connection criteria object that may match the associated client connection in order to match the aggregate connection criteria.",
    )
    not_all_included_connection_criteria: set[str] | None = set_attribute(
        types=_AGGREGATE,
        description="Specifies a connection criteria object that should not match the associated client connection in order to match the aggregate connection criteria.",
    )
    none_included_connection_criteria: set[str] | None = set_attribute(
        types=_AGGREGATE,
        description="Specifies a connection criteria object that must not match the associated client connection in order to match the aggregate connection criteria.",
    )
    included_client_address: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies an address mask that may be used to specify a set of clients that should be included in this Simple Connection Criteria.",
    )
    excluded_client_address: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies an address mask that may be used to specify a set of clients that should be excluded from this Simple Connection Criteria.",
    )
    included_connection_handler: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies a connection handler for clients that should be included in this Simple Connection Criteria.",
    )
    excluded_connection_handler: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies a connection handler for clients that should be excluded from this Simple Connection Criteria.",
    )
    included_protocol: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies the name of a communication protocol that should be used by clients included in this Simple Connection Criteria.",
    )
    excluded_protocol: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies the name of a communication protocol that should be used by clients excluded from this Simple Connection Criteria.",
    )
    communication_security_level: str | None = string_attribute(
        types=_SIMPLE,
        defaults={"simple": "any"},
        enum=SECURITY_LEVELS,
        description="Indicates whether this Simple Connection Criteria should require or allow clients using a secure communication channel.",
    )
    user_auth_type: set[str] | None = set_attribute(
        types=_SIMPLE,
        defaults={"simple": USER_AUTH_TYPES},
        description="Specifies the authentication types for client connections that may be included in this Simple Connection Criteria.",
    )
    authentication_security_level: str | None = string_attribute(
        types=_SIMPLE,
        defaults={"simple": "any"},
        enum=SECURITY_LEVELS,
        description="Indicates whether this Simple Connection Criteria should require or allow clients that authenticated using a secure manner.",
    )
    included_user_sasl_mechanism: set[str] | None = set_attribute(
        types=_SIMPLE,
        alias="includedUserSASLMechanism",
        description="Specifies the names of the SASL mechanisms that should be included in this Simple Connection Criteria.",
    )
    excluded_user_sasl_mechanism: set[str] | None = set_attribute(
        types=_SIMPLE,
        alias="excludedUserSASLMechanism",
        description="Specifies the names of the SASL mechanisms that should be excluded from this Simple Connection Criteria.",
    )
    included_user_base_dn: set[str] | None = set_attribute(
        types=_SIMPLE,
        alias="includedUserBaseDN",
        description="Specifies a base DN below which authenticated user entries may exist for client connections included in this Simple Connection Criteria.",
    )
    excluded_user_base_dn: set[str] | None = set_attribute(
        types=_SIMPLE,
        alias="excludedUserBaseDN",
        description="Specifies a base DN below which authenticated user entries may not exist for client connections included in this Simple Connection Criteria.",
    )
    all_included_user_group_dn: set[str] | None = set_attribute(
        types=_SIMPLE,
        alias="allIncludedUserGroupDN",
        description="Specifies the DN of a group in which authenticated users must exist for all groups listed.",
    )
    any_included_user_group_dn: set[str] | None = set_attribute(
        types=_SIMPLE,
        alias="anyIncludedUserGroupDN",
        description="Specifies the DN of a group in which authenticated users must exist for at least one of the groups listed.",
    )
    not_all_included_user_group_dn: set[str] | None = set_attribute(
        types=_SIMPLE,
        alias="notAllIncludedUserGroupDN",
        description="Specifies the DN of a group in which authenticated users must not exist for all of the groups listed.",
    )
    none_included_user_group_dn: set[str] | None = set_attribute(
        types=_SIMPLE,
        alias="noneIncludedUserGroupDN",
        description="Specifies the DN of a group in which authenticated users must not exist for any of the groups listed.",
    )
    all_included_user_filter: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies a search filter that must match the entry of the authenticated user for all filters listed.",
    )
    any_included_user_filter: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies a search filter that must match the entry of the authenticated user for at least one of the filters listed.",
    )
    not_all_included_user_filter: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies a search filter that must not match the entry of the authenticated user for all of the filters listed.",
    )
    none_included_user_filter: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies a search filter that must not match the entry of the authenticated user for any of the filters listed.",
    )
    all_included_user_privilege: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies the name of a privilege that must be held by the authenticated user for all privileges listed.",
    )
    any_included_user_privilege: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies the name of a privilege that must be held by the authenticated user for at least one of the privileges listed.",
    )
    not_all_included_user_privilege: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies the name of a privilege that must not be held by the authenticated user for all of the privileges listed.",
    )
    none_included_user_privilege: set[str] | None = set_attribute(
        types=_SIMPLE,
        description="Specifies the name of a privilege that must not be held by the authenticated user for any of the privileges listed.",
    )
    description: str | None = string_attribute(
        description="A description for this Connection Criteria",
    )
