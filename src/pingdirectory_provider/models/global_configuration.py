"""
Global Configuration model.

The global configuration is a singleton that always exists on the server.
Every attribute is optional and computed: unset attributes keep whatever
value the server currently has.
"""

from pingdirectory_provider.compatibility.versions import (
    PING_DIRECTORY_9200,
    PING_DIRECTORY_10000,
)
from pingdirectory_provider.models.base import (
    ConfigModel,
    bool_attribute,
    int64_attribute,
    set_attribute,
    string_attribute,
)

GLOBAL_CONFIGURATION_TYPES = ["global-configuration"]

SYNTAX_BEHAVIORS = ["accept", "reject", "warn"]
STARTUP_ERROR_LOGGER_OUTPUT_LOCATIONS = [
    "standard_output",
    "standard_error",
    "server_out_file",
    "standard_output_and_server_out_file",
    "standard_error_and_server_out_file",
    "disabled",
]
WRITABILITY_MODES = ["enabled", "disabled", "internal_only"]
UNRECOVERABLE_DATABASE_ERROR_MODES = [
    "enter_lockdown_mode",
    "raise_unavailable_alarm",
    "initiate_server_shutdown",
]
JMX_VALUE_BEHAVIORS = ["inferred", "string"]


class GlobalConfiguration(ConfigModel):
    """Global Configuration object."""

    instance_name: str | None = string_attribute(
        computed=True,
        description="Specifies a name that may be used to uniquely identify this Directory Server instance among other instances in the environment.",
    )
    location: str | None = string_attribute(
        computed=True,
        description="Specifies the location for this Directory Server. Operations performed which involve communication with other servers may prefer servers in the same location to help ensure low-latency responses.",
    )
    configuration_server_group: str | None = string_attribute(
        computed=True,
        description="When this property is set, changes made to this server using the console or dsconfig can be automatically applied to all servers in the specified server group.",
    )
    force_as_master_for_mirrored_data: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether this server should be forced to assume the master role if no other suitable server is found to act as master or if multiple masters are detected. A master is only needed when changes are made to mirrored data, i.e. data specific to the topology itself and cluster-wide configuration data.",
    )
    encrypt_data: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether the Directory Server should encrypt the data that it stores in all components that support it. This may include certain types of backends (including local DB and large attribute backends), the LDAP changelog, and the replication server database.",
    )
    encryption_settings_cipher_stream_provider: str | None = string_attribute(
        computed=True,
        description="Specifies the cipher stream provider that should be used to protect the contents of the encryption settings database.",
    )
    encrypt_backups_by_default: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether the server should encrypt backups by default.",
    )
    backup_encryption_settings_definition_id: str | None = string_attribute(
        computed=True,
        alias="backupEncryptionSettingsDefinitionID",
        description="The unique identifier for the encryption settings definition to use to generate the encryption key for encrypted backups by default.",
    )
    encrypt_ldif_exports_by_default: bool | None = bool_attribute(
        computed=True,
        alias="encryptLDIFExportsByDefault",
        description="Indicates whether the server should encrypt LDIF exports by default.",
    )
    ldif_export_encryption_settings_definition_id: str | None = string_attribute(
        computed=True,
        alias="ldifExportEncryptionSettingsDefinitionID",
        description="The unique identifier for the encryption settings definition to use to generate the encryption key for encrypted LDIF exports by default.",
    )
    automatically_compress_encrypted_ldif_exports: bool | None = bool_attribute(
        computed=True,
        alias="automaticallyCompressEncryptedLDIFExports",
        description="Indicates whether to automatically compress LDIF exports that are also encrypted.",
    )
    redact_sensitive_values_in_config_logs: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether the values of sensitive configuration properties should be redacted when logging configuration changes, including in the configuration audit log, the error log, and the server.out log file.",
    )
    sensitive_attribute: set[str] | None = set_attribute(
        computed=True,
        description="Provides the ability to indicate that some attributes should be considered sensitive and additional protection should be in place when interacting with those attributes.",
    )
    reject_insecure_requests: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether the Directory Server should reject any LDAP request (other than StartTLS) received from a client that is not using an encrypted connection.",
    )
    allowed_insecure_request_criteria: str | None = string_attribute(
        computed=True,
        description="A set of criteria that may be used to match LDAP requests that may be permitted over an insecure connection even if reject-insecure-requests is true. Note that some types of requests will always be permitted, including StartTLS and start administrative session requests.",
    )
    reject_unauthenticated_requests: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether the Directory Server should reject any LDAP request (other than bind or StartTLS requests) received from a client that has not yet been authenticated, whose last authentication attempt was unsuccessful, or whose last authentication attempt used anonymous authentication.",
    )
    allowed_unauthenticated_request_criteria: str | None = string_attribute(
        computed=True,
        description="A set of criteria that may be used to match LDAP requests that may be permitted over an unauthenticated connection even if reject-unauthenticated-requests is true. Note that some types of requests will always be permitted, including bind, StartTLS, and start administrative session requests.",
    )
    bind_with_dn_requires_password: bool | None = bool_attribute(
        computed=True,
        alias="bindWithDNRequiresPassword",
        description="Indicates whether the Directory Server should reject any simple bind request that contains a DN but no password.",
    )
    disabled_privilege: set[str] | None = set_attribute(
        computed=True,
        description="Specifies the name of a privilege that should not be evaluated by the server.",
    )
    default_password_policy: str | None = string_attribute(
        computed=True,
        description="Specifies the name of the password policy that is in effect for users whose entries do not specify an alternate password policy (either via a real or virtual attribute).",
    )
    maximum_user_data_password_policies_to_cache: int | None = int64_attribute(
        computed=True,
        description="Specifies the maximum number of password policies that are defined in the user data (that is, outside of the configuration) that the server should cache in memory for faster access. A value of zero indicates that the server should not cache any user data password policies.",
    )
    proxied_authorization_identity_mapper: str | None = string_attribute(
        computed=True,
        description="Specifies the name of the identity mapper to map authorization ID values (using the \"u:\" form) provided in the proxied authorization control to the corresponding user entry.",
    )
    verify_entry_digests: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether the digest should always be verified whenever an entry containing a digest is decoded. If this is \"true\", then if a digest exists, it will always be verified. Otherwise, the digest will be written when encoding entries but ignored when decoding entries but may still be available for other verification processing.",
    )
    allowed_insecure_tls_protocol: set[str] | None = set_attribute(
        computed=True,
        alias="allowedInsecureTLSProtocol",
        description="Specifies a set of TLS protocols that will be permitted for use in the server even though there may be known vulnerabilities that could cause their use to be unsafe in some conditions. Enabling support for insecure TLS protocols is discouraged, and is generally recommended only as a short-term measure to permit legacy clients to interact with the server until they can be updated to support more secure communication protocols.",
    )
    allow_insecure_local_jmx_connections: bool | None = bool_attribute(
        computed=True,
        alias="allowInsecureLocalJMXConnections",
        description="Indicates that processes attaching to this server's local JVM are allowed to access internal data through JMX without the authentication requirements that remote JMX connections are subject to. Please review and understand the data that this option will expose (such as cn=monitor) to client applications to ensure there are no security concerns.",
    )
    default_internal_operation_client_connection_policy: str | None = string_attribute(
        computed=True,
        description="Specifies the client connection policy that will be used by default for internal operations.",
    )
    size_limit: int | None = int64_attribute(
        computed=True,
        description="Specifies the maximum number of entries that the Directory Server should return to clients by default when processing a search operation.",
    )
    unauthenticated_size_limit: int | None = int64_attribute(
        computed=True,
        min_version=PING_DIRECTORY_9200,
        description="Supported in PingDirectory product version 9.2.0.0+. The size limit value that will apply for connections from unauthenticated clients. If this is not specified, then the value of the size-limit property will be applied for both authenticated and unauthenticated connections.",
    )
    time_limit: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        description="Specifies the maximum length of time that the Directory Server should be allowed to spend processing a search operation.",
    )
    unauthenticated_time_limit: str | None = string_attribute(
        computed=True,
        min_version=PING_DIRECTORY_9200,
        pd_formatted=True,
        description="Supported in PingDirectory product version 9.2.0.0+. The time limit value that will apply for connections from unauthenticated clients. If this is not specified, then the value of the time-limit property will be applied for both authenticated and unauthenticated connections.",
    )
    idle_time_limit: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        description="Specifies the maximum length of time that a client connection may remain established since its last completed operation.",
    )
    unauthenticated_idle_time_limit: str | None = string_attribute(
        computed=True,
        min_version=PING_DIRECTORY_9200,
        pd_formatted=True,
        description="Supported in PingDirectory product version 9.2.0.0+. The idle-time-limit limit value that will apply for connections from unauthenticated clients. If this is not specified, then the value of the idle-time-limit property will be applied for both authenticated and unauthenticated connections.",
    )
    lookthrough_limit: int | None = int64_attribute(
        computed=True,
        description="Specifies the maximum number of entries that the Directory Server should \"look through\" in the course of processing a search request.",
    )
    unauthenticated_lookthrough_limit: int | None = int64_attribute(
        computed=True,
        min_version=PING_DIRECTORY_9200,
        description="Supported in PingDirectory product version 9.2.0.0+. The lookthrough limit value that will apply for connections from unauthenticated clients. If this is not specified, then the value of the lookthrough-limit property will be applied for both authenticated and unauthenticated connections.",
    )
    ldap_join_size_limit: int | None = int64_attribute(
        computed=True,
        description="Specifies the maximum number of entries that may be directly joined with any individual search result entry.",
    )
    maximum_concurrent_connections: int | None = int64_attribute(
        computed=True,
        description="Specifies the maximum number of LDAP client connections which may be established to this Directory Server at the same time.",
    )
    maximum_concurrent_connections_per_ip_address: int | None = int64_attribute(
        computed=True,
        alias="maximumConcurrentConnectionsPerIPAddress",
        description="Specifies the maximum number of LDAP client connections originating from the same IP address which may be established to this Directory Server at the same time.",
    )
    maximum_concurrent_connections_per_bind_dn: int | None = int64_attribute(
        computed=True,
        alias="maximumConcurrentConnectionsPerBindDN",
        description="Specifies the maximum number of LDAP client connections which may be established to this Directory Server at the same time and authenticated as the same user.",
    )
    maximum_concurrent_unindexed_searches: int | None = int64_attribute(
        computed=True,
        description="Specifies the maximum number of unindexed searches that may be in progress in this backend at any given time. Any unindexed searches requested while the maximum number of unindexed searches are already being processed will be rejected. A value of zero indicates that no limit will be enforced.",
    )
    maximum_attributes_per_add_request: int | None = int64_attribute(
        computed=True,
        description="Specifies the maximum number of attributes that may be included in an add request. This property does not impose any limit on the number of values that an attribute may have.",
    )
    maximum_modifications_per_modify_request: int | None = int64_attribute(
        computed=True,
        description="Specifies the maximum number of modifications that may be included in a modify request. This property does not impose any limit on the number of attribute values that a modification may have.",
    )
    background_thread_for_each_persistent_search: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether the server should use a separate background thread for each persistent search.",
    )
    allow_attribute_name_exceptions: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether the Directory Server should allow underscores in attribute names and allow attribute names to begin with numeric digits (both of which are violations of the LDAP standards).",
    )
    invalid_attribute_syntax_behavior: str | None = string_attribute(
        computed=True,
        enum=SYNTAX_BEHAVIORS,
        description="Specifies how the Directory Server should handle operations whenever an attribute value violates the associated attribute syntax.",
    )
    permit_syntax_violations_for_attribute: set[str] | None = set_attribute(
        computed=True,
        description="Specifies a set of attribute types for which the server will permit values that do not conform to the associated attribute syntax.",
    )
    single_structural_objectclass_behavior: str | None = string_attribute(
        computed=True,
        enum=SYNTAX_BEHAVIORS,
        description="Specifies how the Directory Server should handle operations for an entry does not contain a structural object class, or for an entry that contains multiple structural classes.",
    )
    attributes_modifiable_with_ignore_no_user_modification_request_control: set[str] | None = set_attribute(
        computed=True,
        description="Specifies the operational attribute types that are defined in the schema with the NO-USER-MODIFICATION constraint that the server will allow to be altered if the associated request contains the ignore NO-USER-MODIFICATION request control.",
    )
    maximum_server_out_log_file_size: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        description="The maximum allowed size that the server.out log file will be allowed to have. If a write would cause the file to exceed this size, then the current file will be rotated out of place and a new empty file will be created and the message written to it.",
    )
    maximum_server_out_log_file_count: int | None = int64_attribute(
        computed=True,
        description="The maximum number of server.out log files (including the current active log file) that should be retained. When rotating the log file, if the total number of files exceeds this count, then the oldest file(s) will be removed so that the total number of log files is within this limit.",
    )
    startup_error_logger_output_location: str | None = string_attribute(
        computed=True,
        enum=STARTUP_ERROR_LOGGER_OUTPUT_LOCATIONS,
        description="Specifies how the server should handle error log messages (which may include errors, warnings, and notices) generated during startup. All of these messages will be written to all configured error loggers, but they may also be written to other locations (like standard output, standard error, or the server.out log file) so that they are displayed on the console when the server is starting.",
    )
    exit_on_jvm_error: bool | None = bool_attribute(
        computed=True,
        alias="exitOnJVMError",
        description="Indicates whether the Directory Server should be shut down if a severe error is raised (e.g., an out of memory error) which may prevent the JVM from continuing to run properly.",
    )
    server_error_result_code: int | None = int64_attribute(
        computed=True,
        description="Specifies the numeric value of the result code when request processing fails due to an internal server error.",
    )
    result_code_map: str | None = string_attribute(
        computed=True,
        description="Specifies a result code map that should be used for clients that do not have a map associated with their client connection policy. If the associated client connection policy has a result code map, then that map will be used instead. If no map is associated either with the client connection policy or the global configuration, then an internal default will be used.",
    )
    return_bind_error_messages: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether responses for failed bind operations should include a message string providing the reason for the authentication failure.",
    )
    notify_abandoned_operations: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether the Directory Server should send a response to any operation that is interrupted via an abandon request.",
    )
    duplicate_error_log_limit: int | None = int64_attribute(
        computed=True,
        description="Specifies the maximum number of duplicate error log messages that should be logged in the time window specified by the duplicate-error-log-time-limit property.",
    )
    duplicate_error_log_time_limit: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        description="Specifies the length of time that must expire before duplicate log messages above the duplicate-error-log-limit threshold are logged again to the error log.",
    )
    duplicate_alert_limit: int | None = int64_attribute(
        computed=True,
        description="Specifies the maximum number of duplicate alert messages that should be sent via the administrative alert framework in the time window specified by the duplicate-alert-time-limit property.",
    )
    duplicate_alert_time_limit: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        description="Specifies the length of time that must expire before duplicate messages are sent via the administrative alert framework.",
    )
    writability_mode: str | None = string_attribute(
        computed=True,
        enum=WRITABILITY_MODES,
        description="Specifies the kinds of write operations the Directory Server can process.",
    )
    use_shared_database_cache_across_all_local_db_backends: bool | None = bool_attribute(
        computed=True,
        min_version=PING_DIRECTORY_10000,
        alias="useSharedDatabaseCacheAcrossAllLocalDBBackends",
        description="Supported in PingDirectory product version 10.0.0.0+. Indicates whether the server should use a common database cache that is shared across all local DB backends instead of maintaining a separate cache for each backend.",
    )
    shared_local_db_backend_database_cache_percent: int | None = int64_attribute(
        computed=True,
        min_version=PING_DIRECTORY_10000,
        alias="sharedLocalDBBackendDatabaseCachePercent",
        description="Supported in PingDirectory product version 10.0.0.0+. Specifies the percentage of the JVM memory to allocate to the database cache that is shared across all local DB backends.",
    )
    unrecoverable_database_error_mode: str | None = string_attribute(
        computed=True,
        enum=UNRECOVERABLE_DATABASE_ERROR_MODES,
        description="Specifies the action which should be taken for any database that experiences an unrecoverable error. Action applies to local database backends and the replication recent changes database.",
    )
    database_on_virtualized_or_network_storage: bool | None = bool_attribute(
        computed=True,
        description="This setting provides data integrity options when the Directory Server is installed with a database on a network storage device. A storage device may be accessed directly by a physical server, or indirectly through a virtual machine running on a hypervisor. Enabling this setting will apply changes to all Local DB Backends, the LDAP Changelog Backend, and the replication changelog database.",
    )
    auto_name_with_entry_uuid_connection_criteria: str | None = string_attribute(
        computed=True,
        alias="autoNameWithEntryUUIDConnectionCriteria",
        description="Connection criteria that may be used to identify clients whose add requests should use entryUUID as the naming attribute.",
    )
    auto_name_with_entry_uuid_request_criteria: str | None = string_attribute(
        computed=True,
        alias="autoNameWithEntryUUIDRequestCriteria",
        description="Request criteria that may be used to identify add requests that should use entryUUID as the naming attribute.",
    )
    soft_delete_policy: str | None = string_attribute(
        computed=True,
        description="Specifies the soft delete policy that will be used by default for delete operations. Soft delete operations introduce the ability to control the server behavior of the delete operation. Instead of performing a permanent delete of an entry, deleted entries can be retained as soft deleted entries by their entryUUID values and are available for undelete at a later time. In addition to a soft delete policy enabling soft deletes, delete operations sent to the server must have the soft delete request control present with sufficient access privileges to access the soft delete request control.",
    )
    subtree_accessibility_alert_time_limit: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        description="Specifies the length of time that a subtree may remain hidden or read-only before an administrative alert is sent.",
    )
    warn_for_backends_with_multiple_base_dns: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether the server should issue a warning when enabling a backend that contains multiple base DNs.",
    )
    forced_gc_prime_duration: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        alias="forcedGCPrimeDuration",
        description="Specifies the minimum length of time required for backend or request processor initialization that will trigger the server to force an explicit garbage collection. A value of \"0 seconds\" indicates that the server should never invoke an explicit garbage collection regardless of the length of time required to initialize the server backends.",
    )
    replication_set_name: str | None = string_attribute(
        computed=True,
        description="The name of the replication set assigned to this Directory Server. Restricted domains are only replicated within instances using the same replication set name.",
    )
    startup_min_replication_backlog_count: int | None = int64_attribute(
        computed=True,
        description="The number of outstanding changes any replica can have before the Directory Server will start accepting connections. The Directory Server may never accept connections if this setting is too low. If you are unsure which value to use, you can use the number of expected updates within a five second interval.",
    )
    replication_backlog_count_alert_threshold: int | None = int64_attribute(
        computed=True,
        description="An alert is sent when the number of outstanding replication changes for the Directory Server has exceeded this threshold for longer than the replication backlog duration alert threshold.",
    )
    replication_backlog_duration_alert_threshold: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        description="An alert is sent when the number of outstanding replication changes for the Directory Server has exceeded the replication backlog count alert threshold for longer than this duration.",
    )
    replication_assurance_source_timeout_suspend_duration: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        description="The amount of time a replication assurance source (i.e. a peer Directory Server) will be suspended from assurance requirements on this Directory Server if it experiences an assurance timeout.",
    )
    replication_assurance_source_backlog_fast_start_threshold: int | None = int64_attribute(
        computed=True,
        description="The maximum number of replication backlog updates a replication assurance source (i.e. a peer Directory Server) can have and be immediately recognized as an available assurance source by this Directory Server.",
    )
    replication_history_limit: int | None = int64_attribute(
        computed=True,
        description="Specifies the size limit for historical information.",
    )
    allow_inherited_replication_of_subordinate_backends: bool | None = bool_attribute(
        computed=True,
        description="Allow replication to be inherited by subordinate/child backends.",
    )
    replication_purge_obsolete_replicas: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether state about obsolete replicas is automatically purged.",
    )
    smtp_server: set[str] | None = set_attribute(
        computed=True,
        description="Specifies the set of servers that will be used to send email messages. The order in which the servers are listed indicates the order in which the Directory Server will attempt to use them in the course of sending a message. The first attempt will always go to the server at the top of the list, and servers further down the list will only be used if none of the servers listed above it were able to successfully send the message.",
    )
    max_smtp_connection_count: int | None = int64_attribute(
        computed=True,
        alias="maxSMTPConnectionCount",
        description="The maximum number of SMTP connections that will be maintained for delivering email messages.",
    )
    max_smtp_connection_age: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        alias="maxSMTPConnectionAge",
        description="The maximum length of time that a connection to an SMTP server should be considered valid.",
    )
    smtp_connection_health_check_interval: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        description="The length of time between checks to ensure that available SMTP connections are still valid.",
    )
    allowed_task: set[str] | None = set_attribute(
        computed=True,
        description="Specifies the fully-qualified name of a Java class that may be invoked in the server.",
    )
    enable_sub_operation_timer: bool | None = bool_attribute(
        computed=True,
        description="Indicates whether the Directory Server should attempt to record information about the length of time required to process various phases of an operation. Enabling this feature may impact performance, but could make it easier to identify potential bottlenecks in operation processing.",
    )
    maximum_shutdown_time: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        description="Specifies the maximum amount of time the shutdown of Directory Server may take.",
    )
    network_address_cache_ttl: str | None = string_attribute(
        computed=True,
        pd_formatted=True,
        alias="networkAddressCacheTTL",
        description="Specifies the length of time that the Directory Server should cache the IP addresses associated with the names of systems with which it interacts.",
    )
    network_address_outage_cache_enabled: bool | None = bool_attribute(
        computed=True,
        description="Specifies whether the Directory Server should cache the last valid IP addresses associated with the names of systems with which it interacts with when the domain name service returns an unknown host exception. Java may return an unknown host exception when there is unexpected interruption in domain name service so this setting protects the Directory Server from temporary DNS server outages if previous results have been cached.",
    )
    tracked_application: set[str] | None = set_attribute(
        computed=True,
        description="Specifies criteria for identifying specific applications that access the server to enable tracking throughput and latency of LDAP operations issued by an application.",
    )
    jmx_value_behavior: str | None = string_attribute(
        computed=True,
        enum=JMX_VALUE_BEHAVIORS,
        description="Specifies how a Java type is chosen for monitor attributes exposed as JMX attribute values.",
    )
    jmx_use_legacy_mbean_names: bool | None = bool_attribute(
        computed=True,
        description="When set to true, the server will use its original, non-standard JMX MBean names for the monitoring MBeans. These include RDN keys of \"Rdn1\" and \"Rdn2\" instead of the recommended \"type\" and \"name\" keys. This should option should only be enabled for installations that have monitoring infrastructure that depends on the old keys.",
    )
