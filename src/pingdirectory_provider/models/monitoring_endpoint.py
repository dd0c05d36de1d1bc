"""Monitoring Endpoint model."""

from pingdirectory_provider.models.base import (
    NamedConfigModel,
    bool_attribute,
    int64_attribute,
    set_attribute,
    string_attribute,
)

MONITORING_ENDPOINT_TYPES = ["statsd"]


class MonitoringEndpoint(NamedConfigModel):
    """Monitoring Endpoint configuration object."""

    hostname: str | None = string_attribute(
        required=True,
        description="The name of the host where this StatsD Monitoring Endpoint should send metric data.",
    )
    server_port: int | None = int64_attribute(
        default=8125,
        description="Specifies the port number of the endpoint where metric data should be sent.",
    )
    connection_type: str | None = string_attribute(
        default="unencrypted-udp",
        description="Specifies the protocol and security that this StatsD Monitoring Endpoint should use to connect to the configured endpoint.",
    )
    trust_manager_provider: str | None = string_attribute(
        description="The trust manager provider to use if SSL over TCP is to be used for connection-level security.",
    )
    additional_tags: set[str] | None = set_attribute(
        description="Specifies any optional additional tags to include in StatsD messages. Tags should be written in a [key]:[value] format (\"host:server1\", for example).",
    )
    enabled: bool | None = bool_attribute(
        required=True,
        description="Indicates whether this Monitoring Endpoint is enabled for use in the Directory Server.",
    )
