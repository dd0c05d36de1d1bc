"""
Trust Manager Provider model.

Trust manager providers decide whether the server trusts certificates
presented by peers. The PIN of file-based providers is write-only: the
server never returns it, so state keeps the planned value.
"""

from pingdirectory_provider.models.base import (
    NamedConfigModel,
    bool_attribute,
    set_attribute,
    string_attribute,
)

TRUST_MANAGER_PROVIDER_TYPES = ["blind", "file-based", "jvm-default", "third-party"]

_FILE_BASED = ["file-based"]
_THIRD_PARTY = ["third-party"]


class TrustManagerProvider(NamedConfigModel):
    """Trust Manager Provider configuration object."""

    extension_class: str | None = string_attribute(
        types=_THIRD_PARTY,
        required_for=_THIRD_PARTY,
        requires_replace=True,
        description="The fully-qualified name of the Java class providing the logic for the Third Party Trust Manager Provider.",
    )
    extension_argument: set[str] | None = set_attribute(
        types=_THIRD_PARTY,
        description="The set of arguments used to customize the behavior for the Third Party Trust Manager Provider. Each configuration property should be given in the form 'name=value'.",
    )
    trust_store_file: str | None = string_attribute(
        types=_FILE_BASED,
        required_for=_FILE_BASED,
        description="Specifies the path to the file containing the trust information. It can be an absolute path or a path that is relative to the Directory Server instance root.",
    )
    trust_store_type: str | None = string_attribute(
        types=_FILE_BASED,
        description="Specifies the format for the data in the trust store file.",
    )
    trust_store_pin: str | None = string_attribute(
        types=_FILE_BASED,
        sensitive=True,
        description="Specifies the clear-text PIN needed to access the File Based Trust Manager Provider.",
    )
    trust_store_pin_file: str | None = string_attribute(
        types=_FILE_BASED,
        description="Specifies the path to the text file whose only contents should be a single line containing the clear-text PIN needed to access the File Based Trust Manager Provider.",
    )
    trust_store_pin_passphrase_provider: str | None = string_attribute(
        types=_FILE_BASED,
        description="The passphrase provider to use to obtain the clear-text PIN needed to access the File Based Trust Manager Provider.",
    )
    enabled: bool | None = bool_attribute(
        required=True,
        description="Indicate whether the Trust Manager Provider is enabled for use.",
    )
    include_jvm_default_issuers: bool | None = bool_attribute(
        types=["blind", "file-based", "third-party"],
        computed=True,
        alias="includeJVMDefaultIssuers",
        description="Indicates whether certificates issued by an authority included in the JVM's set of default issuers should be automatically trusted, even if they would not otherwise be trusted by this provider.",
    )
