"""
Base resource class providing the common lifecycle of configuration objects.

This module defines :class:`ConfigResource`, which implements config
validation, plan modification and create/read/update/delete against the
Configuration API for any configuration object family. Families only
declare their model, collection path and type options; the behavior is
driven by the model field metadata.

Two variants cover objects the provider cannot create or delete:

- :class:`DefaultConfigResource` adopts an object that already exists on
  the server and only ever modifies it.
- :class:`SingletonConfigResource` manages a global object that has no name.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from typing import Any, ClassVar
from urllib.parse import quote

from pydantic import BaseModel

from pingdirectory_provider.compatibility import (
    check_attribute_supported,
    check_resource_supported,
)
from pingdirectory_provider.configuration import ResourceConfiguration
from pingdirectory_provider.constants import (
    CONFIG_SCHEMA_URN_PREFIX,
    RESOURCE_NAME_PREFIX,
    SINGLETON_ID,
    SUMMARY_NO_UPDATE_OPERATIONS,
)
from pingdirectory_provider.diagnostics import Diagnostics
from pingdirectory_provider.errors import PingDirectoryAPIError
from pingdirectory_provider.models.api import UpdateRequest
from pingdirectory_provider.models.base import (
    AttributeInfo,
    AttributeKind,
    ConfigModel,
    attributes_of,
)
from pingdirectory_provider.observability.logging import (
    ProviderLogger,
    correlation_scope,
)
from pingdirectory_provider.observability.metrics import record_resource_operation
from pingdirectory_provider.operations import (
    REDACTED_VALUE,
    create_operations,
    log_update_operations,
)
from pingdirectory_provider.schema import Schema, build_resource_schema
from pingdirectory_provider.types import (
    UNKNOWN,
    bool_or_none,
    float_or_none,
    get_string_set,
    int_or_none,
    is_configured,
    is_defined,
    is_empty_string,
    is_non_empty_string,
    is_unknown,
    string_or_none,
    value_of,
)
from pingdirectory_provider.utils.http_errors import (
    report_http_error,
    report_http_error_as_warning,
)
from pingdirectory_provider.utils.messages import read_messages

_VALUE_READERS = {
    AttributeKind.BOOL: bool_or_none,
    AttributeKind.INT64: int_or_none,
    AttributeKind.FLOAT64: float_or_none,
    AttributeKind.STRING_SET: get_string_set,
}


@dataclass
class PlanResult:
    """Outcome of planning a configuration against the current state."""

    plan: ConfigModel | None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    requires_replace: list[str] = field(default_factory=list)


@dataclass
class ResourceResult:
    """
    Outcome of a resource operation.

    ``removed`` is set by read when the object no longer exists on the
    server and should be dropped from state.
    """

    state: BaseModel | None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    removed: bool = False


def build_model(model: type[ConfigModel], values: dict[str, Any]) -> ConfigModel:
    """Build a plan or state model; UNKNOWN values are left out of the fields set."""
    known = {name: value for name, value in values.items() if not is_unknown(value)}
    return model.model_construct(_fields_set=set(known), **known)


def _copy_value(value: Any) -> Any:
    if isinstance(value, set):
        return set(value)
    return value


def _comparable(value: Any) -> Any:
    if value == "":
        return None
    if isinstance(value, (set, frozenset, list)):
        return frozenset(value)
    return value


def _normalize_formatted(value: str) -> str:
    return "".join(value.split()).lower()


class ConfigResource:
    """
    Managed configuration object stored in a Configuration API collection.

    Subclasses set the class attributes below. Objects are addressed as
    ``<collection_path>/<name>``, or below their parent object as
    ``<parent_collection_path>/<parent>/<collection_path>/<name>``.
    """

    type_name: ClassVar[str]
    display_name: ClassVar[str]
    description: ClassVar[str] = ""
    model: ClassVar[type[ConfigModel]]
    schema_name: ClassVar[str]
    collection_path: ClassVar[str]
    type_options: ClassVar[tuple[str, ...]]
    name_attribute: ClassVar[str | None] = "name"
    parent_attribute: ClassVar[str | None] = None
    parent_collection_path: ClassVar[str | None] = None
    min_version: ClassVar[str | None] = None
    type_min_versions: ClassVar[dict[str, str]] = {}
    at_least_one_of: ClassVar[dict[str, list[tuple[str, ...]]]] = {}
    is_default: ClassVar[bool] = False
    singleton: ClassVar[bool] = False

    def __init__(self, configuration: ResourceConfiguration):
        """
        Initialize resource.

        Args:
            configuration: Provider configuration and API client
        """
        self.provider_config = configuration.provider_config
        self.api_client = configuration.api_client
        self.logger = ProviderLogger(f"{__name__}.{self.type_name}")

    # ------------------------------------------------------------------
    # Metadata and schema
    # ------------------------------------------------------------------

    def metadata(self) -> str:
        """Provider type name of this resource."""
        return f"{RESOURCE_NAME_PREFIX}{self.type_name}"

    def schema(self) -> Schema:
        return build_resource_schema(
            self.model,
            description=self.description or f"Manages a {self.display_name}.",
            type_options=self.type_options,
            named=self.name_attribute == "name",
            is_default=self.is_default,
            name_attribute=self.name_attribute,
        )

    @property
    def attributes(self) -> dict[str, AttributeInfo]:
        return attributes_of(self.model)

    @property
    def sensitive_paths(self) -> list[str]:
        return [info.path for info in self.attributes.values() if info.sensitive]

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def schema_urn(self, resource_type: str) -> str:
        """Schema URN sent in add requests for a resource type."""
        urn = f"{CONFIG_SCHEMA_URN_PREFIX}{self.schema_name}"
        if resource_type == self.schema_name:
            return urn
        return f"{urn}:{resource_type}"

    def type_from_schemas(self, schemas: list[str]) -> str | None:
        """Resolve the resource type from the schema URNs of a response."""
        prefix = f"{CONFIG_SCHEMA_URN_PREFIX}{self.schema_name}"
        for urn in schemas:
            if urn == prefix:
                resource_type = self.schema_name
            elif urn.startswith(prefix + ":"):
                resource_type = urn[len(prefix) + 1 :]
            else:
                continue
            if resource_type in self.type_options:
                return resource_type
        return None

    def object_name(self, model: BaseModel) -> str | None:
        if self.name_attribute is None:
            return None
        value = value_of(model, self.name_attribute)
        return value if is_defined(value) else None

    def collection_url(self, model: BaseModel) -> str:
        if self.parent_attribute is None:
            return self.collection_path
        parent = value_of(model, self.parent_attribute)
        return (
            f"{self.parent_collection_path}/{quote(str(parent), safe='')}/"
            f"{self.collection_path}"
        )

    def object_url(self, model: BaseModel) -> str:
        if self.singleton:
            return self.collection_path
        name = self.object_name(model) or ""
        return f"{self.collection_url(model)}/{quote(name, safe='')}"

    def object_label(self, model: BaseModel) -> str:
        """Human-readable identifier used in logs."""
        if self.singleton:
            return self.display_name
        name = self.object_name(model) or "<unknown>"
        if self.parent_attribute is not None:
            parent = value_of(model, self.parent_attribute)
            if is_defined(parent):
                return f"{parent}/{name}"
        return name

    # ------------------------------------------------------------------
    # Validation and planning
    # ------------------------------------------------------------------

    def _configured_type(self, config: BaseModel) -> str | None:
        if self.is_default:
            return None
        resource_type = value_of(config, "type")
        if is_defined(resource_type):
            return resource_type
        if len(self.type_options) == 1:
            return self.type_options[0]
        return None

    def validate_config(self, config: BaseModel) -> Diagnostics:
        """
        Check a configuration without contacting the server.

        Returns:
            Diagnostics with one error per problem found
        """
        diagnostics = Diagnostics()

        if self.name_attribute == "name" and not is_non_empty_string(
            value_of(config, "name")
        ):
            diagnostics.add_error(
                "Missing required attribute",
                "Attribute 'name' is required",
                attribute="name",
            )

        configured_type = value_of(config, "type")
        if self.is_default and is_defined(configured_type):
            diagnostics.add_error(
                "Invalid attribute configuration",
                f"Attribute 'type' cannot be configured on {self.metadata()} resources",
                attribute="type",
            )
        elif is_defined(configured_type) and configured_type not in self.type_options:
            diagnostics.add_error(
                "Invalid attribute value",
                f"Attribute 'type' value must be one of {list(self.type_options)}, "
                f"got: {configured_type}",
                attribute="type",
            )
        elif not self.is_default and not is_defined(configured_type):
            if len(self.type_options) > 1:
                diagnostics.add_error(
                    "Missing required attribute",
                    "Attribute 'type' is required",
                    attribute="type",
                )

        for name, info in self.attributes.items():
            value = value_of(config, name)
            if not is_defined(value):
                addresses_object = info.parent or name == self.name_attribute
                if info.required and (addresses_object or not self.is_default):
                    diagnostics.add_error(
                        "Missing required attribute",
                        f"Attribute '{name}' is required",
                        attribute=name,
                    )
                continue
            if info.enum is not None:
                values = value if info.is_set else [value]
                for item in values:
                    if item not in info.enum:
                        diagnostics.add_error(
                            "Invalid attribute value",
                            f"Attribute '{name}' value must be one of "
                            f"{list(info.enum)}, got: {item}",
                            attribute=name,
                        )

        resource_type = self._configured_type(config)
        if resource_type in self.type_options:
            self._validate_type_dependent(
                config, resource_type, diagnostics, check_required=True
            )
        return diagnostics

    def _validate_type_dependent(
        self,
        config: BaseModel,
        resource_type: str,
        diagnostics: Diagnostics,
        check_required: bool,
    ) -> None:
        for name, info in self.attributes.items():
            configured = is_configured(config, name)
            if configured and not info.applies_to(resource_type):
                diagnostics.add_error(
                    "Invalid attribute combination",
                    f"Attribute '{name}' is only valid when 'type' is one of "
                    f"{list(info.types or ())}",
                    attribute=name,
                )
            elif (
                check_required
                and not configured
                and resource_type in info.required_for
            ):
                diagnostics.add_error(
                    "Missing required attribute",
                    f"Attribute '{name}' is required when 'type' is '{resource_type}'",
                    attribute=name,
                )

        if not check_required:
            return
        for group in self.at_least_one_of.get(resource_type, []):
            if not any(is_configured(config, name) for name in group):
                diagnostics.add_error(
                    "Missing attribute configuration",
                    f"When 'type' is '{resource_type}', at least one of these "
                    f"attributes must be configured: {list(group)}",
                )

    def _check_versions(
        self, config: BaseModel, resource_type: str | None, diagnostics: Diagnostics
    ) -> None:
        actual = self.provider_config.product_version
        if self.min_version is not None:
            check_resource_supported(
                diagnostics, self.min_version, actual, self.metadata()
            )
        if resource_type in self.type_min_versions:
            check_resource_supported(
                diagnostics,
                self.type_min_versions[resource_type],
                actual,
                f'{self.metadata()} with type "{resource_type}"',
            )
        for name, info in self.attributes.items():
            if info.min_version is None:
                continue
            value = value_of(config, name)
            if info.kind == AttributeKind.STRING:
                configured = is_non_empty_string(value)
            else:
                configured = is_defined(value)
            if configured:
                check_attribute_supported(diagnostics, name, info.min_version, actual)

    def modify_plan(
        self, config: BaseModel, state: ConfigModel | None = None
    ) -> PlanResult:
        """
        Compute the planned model for a configuration.

        Unconfigured attributes take their default (non-default resources
        only) or their prior state value when computed; attributes that do
        not apply to the planned type are nulled. Values still unknown are
        left out of the plan's fields set.

        Args:
            config: Configuration model as written by the user
            state: Current state, or None when the object is being created

        Returns:
            PlanResult with the plan, diagnostics and the attributes whose
            change forces the object to be replaced
        """
        diagnostics = Diagnostics()
        values: dict[str, Any] = {}

        if self.is_default:
            resource_type = value_of(state, "type") if state is not None else UNKNOWN
        else:
            resource_type = self._configured_type(config) or UNKNOWN
        values["type"] = resource_type
        known_type = resource_type if is_defined(resource_type) else None

        if self.singleton:
            values["id"] = SINGLETON_ID
        elif state is not None:
            values["id"] = value_of(state, "id")
        else:
            values["id"] = UNKNOWN
        if self.name_attribute == "name":
            values["name"] = value_of(config, "name")

        for name, info in self.attributes.items():
            configured = value_of(config, name)
            prior = value_of(state, name) if state is not None else UNKNOWN
            if is_defined(configured):
                values[name] = _copy_value(configured)
            elif known_type is not None and not info.applies_to(known_type):
                values[name] = info.empty_value()
            elif self.is_default:
                values[name] = _copy_value(prior)
            elif info.computed:
                default = (
                    info.default_for(known_type) if info.applies_to(known_type) else None
                )
                if default is not None:
                    values[name] = default
                else:
                    values[name] = _copy_value(prior)
            else:
                values[name] = None

        if state is not None:
            values["notifications"] = value_of(state, "notifications")
            values["required_actions"] = value_of(state, "required_actions")

        if self.is_default and known_type is not None:
            self._validate_type_dependent(
                config, known_type, diagnostics, check_required=False
            )
        self._check_versions(config, known_type, diagnostics)

        plan = build_model(self.model, values)
        requires_replace = (
            self._requires_replace(plan, state) if state is not None else []
        )
        return PlanResult(plan, diagnostics, requires_replace)

    def _replace_attributes(self) -> list[str]:
        names = []
        if self.name_attribute == "name":
            names.append("name")
        if not self.is_default and len(self.type_options) > 1:
            names.append("type")
        for name, info in self.attributes.items():
            if (
                info.parent
                or name == self.name_attribute
                or (info.requires_replace and not self.is_default)
            ):
                names.append(name)
        return names

    def _requires_replace(self, plan: ConfigModel, state: ConfigModel) -> list[str]:
        changed = []
        for name in self._replace_attributes():
            planned = value_of(plan, name)
            if is_unknown(planned):
                continue
            current = value_of(state, name)
            if is_unknown(current):
                continue
            if _comparable(planned) != _comparable(current):
                changed.append(name)
        return changed

    # ------------------------------------------------------------------
    # Request and response mapping
    # ------------------------------------------------------------------

    def build_add_request(self, plan: ConfigModel) -> dict[str, Any]:
        """Build the add request body for a planned object."""
        resource_type = plan.type
        body: dict[str, Any] = {"schemas": [self.schema_urn(resource_type)]}
        if self.name_attribute == "name":
            body["id"] = plan.name
        for name, info in self.attributes.items():
            if info.parent or not info.applies_to(resource_type):
                continue
            value = value_of(plan, name)
            if not is_defined(value):
                continue
            if info.is_set:
                if not value:
                    continue
                value = sorted(value)
            elif info.kind == AttributeKind.STRING and value == "":
                continue
            body[info.alias] = value
        return body

    def _redacted(self, body: dict[str, Any]) -> dict[str, Any]:
        hidden = {info.alias for info in self.attributes.values() if info.sensitive}
        return {
            key: (REDACTED_VALUE if key in hidden else value)
            for key, value in body.items()
        }

    def _log_json(self, label: str, body: dict[str, Any]) -> None:
        self.logger.debug(f"{label}: {json.dumps(self._redacted(body), default=str)}")

    def _formatted_value(
        self,
        name: str,
        expected: Any,
        returned: str | None,
        diagnostics: Diagnostics,
    ) -> str | None:
        """
        Pick the state value for an attribute the server may re-format.

        Equivalent values that differ only in spacing or case keep the
        planned form; anything else is reported and the server value wins.
        """
        if (
            not is_non_empty_string(expected)
            or not is_non_empty_string(returned)
            or expected == returned
        ):
            return returned
        if _normalize_formatted(expected) == _normalize_formatted(returned):
            return expected
        diagnostics.add_warning(
            "Mismatched PingDirectory formatted value",
            f"Attribute '{name}' was planned as '{expected}' but PingDirectory "
            f"returned '{returned}'. Use the PingDirectory-formatted value in the "
            "configuration to avoid a permanent difference.",
            attribute=name,
        )
        return returned

    def read_response(
        self,
        response: dict[str, Any],
        diagnostics: Diagnostics,
        expected: BaseModel | None = None,
    ) -> ConfigModel | None:
        """
        Convert a Configuration API object into a state model.

        Args:
            response: Object returned by the server
            diagnostics: Diagnostics to append warnings and errors to
            expected: Plan or prior state; supplies values the server never
                returns (sensitive and parent attributes) and decides
                whether a missing string reads as ``""`` or null

        Returns:
            The state model, or None when the response is not an object of
            this family
        """
        schemas = response.get("schemas") or []
        resource_type = self.type_from_schemas(schemas)
        if resource_type is None:
            diagnostics.add_error(
                f"Unexpected response type for {self.display_name}",
                f"The Configuration API returned schemas {schemas}",
            )
            return None

        def expected_value(name: str) -> Any:
            return value_of(expected, name) if expected is not None else UNKNOWN

        values: dict[str, Any] = {"type": resource_type}
        if self.singleton:
            values["id"] = SINGLETON_ID
        else:
            values["id"] = response.get("id")
        if self.name_attribute == "name":
            values["name"] = response.get("id")

        for name, info in self.attributes.items():
            if info.parent or info.sensitive:
                prior = expected_value(name)
                values[name] = None if is_unknown(prior) else _copy_value(prior)
                continue
            if not info.applies_to(resource_type):
                values[name] = info.empty_value()
                continue
            raw = response.get(info.alias)
            if info.kind == AttributeKind.STRING:
                use_empty = (
                    info.computed
                    or self.is_default
                    or is_empty_string(expected_value(name))
                )
                value = string_or_none(
                    None if raw is None else str(raw), use_empty
                )
                if info.pd_formatted and expected is not None:
                    value = self._formatted_value(
                        name, expected_value(name), value, diagnostics
                    )
                values[name] = value
            else:
                values[name] = _VALUE_READERS[info.kind](raw)

        notifications, required_actions = read_messages(response)
        values["notifications"] = notifications
        values["required_actions"] = required_actions
        return build_model(self.model, values)

    def _copy_values_not_returned(self, state: ConfigModel, plan: ConfigModel) -> None:
        for name, info in self.attributes.items():
            if not (info.parent or info.sensitive):
                continue
            planned = value_of(plan, name)
            if not is_unknown(planned):
                setattr(state, name, _copy_value(planned))
                state.model_fields_set.add(name)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def create(self, plan: ConfigModel) -> ResourceResult:
        """
        Create the configuration object described by a plan.

        Returns:
            ResourceResult with the state read back from the server
        """
        diagnostics = Diagnostics()
        body = self.build_add_request(plan)
        self._log_json("Add request", body)
        try:
            response = await self.api_client.add_config_object(
                self.collection_url(plan), body
            )
        except PingDirectoryAPIError as e:
            report_http_error(
                diagnostics, f"An error occurred while creating the {self.display_name}", e
            )
            return ResourceResult(None, diagnostics)

        self._log_json("Add response", response)
        state = self.read_response(response, diagnostics, expected=plan)
        return ResourceResult(state, diagnostics)

    async def read(self, state: ConfigModel) -> ResourceResult:
        """
        Refresh a state model from the server.

        A non-default object that no longer exists is reported as a warning
        and flagged for removal from state.
        """
        diagnostics = Diagnostics()
        try:
            response = await self.api_client.get_config_object(self.object_url(state))
        except PingDirectoryAPIError as e:
            summary = f"An error occurred while getting the {self.display_name}"
            if e.not_found and not self.is_default:
                report_http_error_as_warning(diagnostics, summary, e)
                return ResourceResult(None, diagnostics, removed=True)
            report_http_error(diagnostics, summary, e)
            return ResourceResult(state, diagnostics)

        self._log_json("Read response", response)
        new_state = self.read_response(response, diagnostics, expected=state)
        return ResourceResult(new_state, diagnostics)

    async def update(self, plan: ConfigModel, state: ConfigModel) -> ResourceResult:
        """
        Send the operations that move the server object from state to plan.

        When nothing changed the state is returned untouched.
        """
        diagnostics = Diagnostics()
        ops = create_operations(plan, state)
        if not ops:
            self.logger.warning(SUMMARY_NO_UPDATE_OPERATIONS)
            return ResourceResult(state, diagnostics)

        log_update_operations(ops, self.sensitive_paths)
        try:
            response = await self.api_client.update_config_object(
                self.object_url(plan), UpdateRequest(operations=ops)
            )
        except PingDirectoryAPIError as e:
            report_http_error(
                diagnostics, f"An error occurred while updating the {self.display_name}", e
            )
            return ResourceResult(state, diagnostics)

        self._log_json("Update response", response)
        new_state = self.read_response(response, diagnostics, expected=plan)
        return ResourceResult(new_state, diagnostics)

    async def delete(self, state: ConfigModel) -> Diagnostics:
        """Delete the configuration object. An object that is already gone is not an error."""
        diagnostics = Diagnostics()
        try:
            await self.api_client.delete_config_object(self.object_url(state))
        except PingDirectoryAPIError as e:
            if not e.not_found:
                report_http_error(
                    diagnostics,
                    f"An error occurred while deleting the {self.display_name}",
                    e,
                )
        return diagnostics

    def import_state(self, import_id: str) -> ResourceResult:
        """
        Build the minimal state for importing an existing object.

        Child objects are imported as ``<parent>/<name>``. The returned
        state must be refreshed with :meth:`read`.
        """
        diagnostics = Diagnostics()
        values: dict[str, Any] = {}
        if self.singleton:
            values["id"] = SINGLETON_ID
        elif self.parent_attribute is not None:
            parts = import_id.split("/")
            if len(parts) != 2 or not all(parts):
                diagnostics.add_error(
                    "Invalid import id for resource",
                    f"Expected [{self.parent_attribute}]/[{self.name_attribute}]. "
                    f"Got: {import_id}",
                )
                return ResourceResult(None, diagnostics)
            values[self.parent_attribute] = parts[0]
            values[self.name_attribute] = parts[1]
        else:
            values[self.name_attribute] = import_id
        return ResourceResult(build_model(self.model, values), diagnostics)

    # ------------------------------------------------------------------
    # Apply
    # ------------------------------------------------------------------

    async def apply(
        self, config: BaseModel, state: ConfigModel | None = None
    ) -> ResourceResult:
        """
        Validate, plan and apply a configuration in one call.

        Creates the object when there is no state, replaces it when an
        attribute that cannot be modified in place changed, and updates it
        otherwise.

        Args:
            config: Configuration model as written by the user
            state: Current state, or None for a new object

        Returns:
            ResourceResult with the new state and all diagnostics
        """
        with correlation_scope() as corr_id:
            return await self._apply(config, state, corr_id)

    async def _apply(
        self, config: BaseModel, state: ConfigModel | None, corr_id: str
    ) -> ResourceResult:
        resource_type = self.metadata()
        resource_name = self.object_label(config if state is None else state)
        start_time = time.time()
        self.logger.log_operation_start(
            resource_type, resource_name, "apply", correlation_id=corr_id
        )

        operation = "create" if state is None else "update"
        try:
            diagnostics = self.validate_config(config)
            if diagnostics.has_error():
                return self._finish(
                    ResourceResult(state, diagnostics),
                    resource_name,
                    "validate",
                    start_time,
                )

            planned = self.modify_plan(config, state)
            diagnostics.extend(planned.diagnostics)
            if diagnostics.has_error():
                return self._finish(
                    ResourceResult(state, diagnostics), resource_name, "plan", start_time
                )

            if state is None:
                result = await self.create(planned.plan)
            elif planned.requires_replace:
                operation = "replace"
                self.logger.info(
                    f"Replacing {resource_type} {resource_name}, changed: "
                    f"{', '.join(planned.requires_replace)}"
                )
                delete_diagnostics = await self.delete(state)
                if delete_diagnostics.has_error():
                    diagnostics.extend(delete_diagnostics)
                    return self._finish(
                        ResourceResult(state, diagnostics),
                        resource_name,
                        operation,
                        start_time,
                    )
                replacement = self.modify_plan(config, None)
                result = await self.create(replacement.plan)
            else:
                result = await self.update(planned.plan, state)
        except Exception as e:
            duration = time.time() - start_time
            self.logger.log_operation_error(
                resource_type, resource_name, operation, str(e), duration
            )
            record_resource_operation(resource_type, operation, "error", duration)
            raise

        diagnostics.extend(result.diagnostics)
        result.diagnostics = diagnostics
        return self._finish(result, resource_name, operation, start_time)

    def _finish(
        self,
        result: ResourceResult,
        resource_name: str,
        operation: str,
        start_time: float,
    ) -> ResourceResult:
        resource_type = self.metadata()
        duration = time.time() - start_time
        if result.diagnostics.has_error():
            self.logger.log_operation_error(
                resource_type,
                resource_name,
                operation,
                result.diagnostics.error_summary,
                duration,
            )
            record_resource_operation(resource_type, operation, "error", duration)
        else:
            self.logger.log_operation_success(
                resource_type, resource_name, operation, duration
            )
            record_resource_operation(resource_type, operation, "success", duration)
        return result


class DefaultConfigResource(ConfigResource):
    """
    Existing configuration object adopted by the provider.

    Create reads the object and applies any differences, delete only drops
    it from state.
    """

    is_default = True

    async def create(self, plan: ConfigModel) -> ResourceResult:
        diagnostics = Diagnostics()
        try:
            response = await self.api_client.get_config_object(self.object_url(plan))
        except PingDirectoryAPIError as e:
            report_http_error(
                diagnostics, f"An error occurred while getting the {self.display_name}", e
            )
            return ResourceResult(None, diagnostics)

        self._log_json("Read response", response)
        state = self.read_response(response, diagnostics)
        if state is None:
            return ResourceResult(None, diagnostics)
        self._validate_type_dependent(
            plan, state.type, diagnostics, check_required=False
        )
        if diagnostics.has_error():
            return ResourceResult(None, diagnostics)

        ops = create_operations(plan, state)
        if ops:
            log_update_operations(ops, self.sensitive_paths)
            try:
                response = await self.api_client.update_config_object(
                    self.object_url(plan), UpdateRequest(operations=ops)
                )
            except PingDirectoryAPIError as e:
                report_http_error(
                    diagnostics,
                    f"An error occurred while updating the {self.display_name}",
                    e,
                )
                return ResourceResult(None, diagnostics)
            self._log_json("Update response", response)
            state = self.read_response(response, diagnostics, expected=plan)

        if state is not None:
            self._copy_values_not_returned(state, plan)
        return ResourceResult(state, diagnostics)

    async def delete(self, state: ConfigModel) -> Diagnostics:
        self.logger.debug(
            f"Removing {self.metadata()} {self.object_label(state)} from state only"
        )
        return Diagnostics()


class SingletonConfigResource(DefaultConfigResource):
    """Global configuration object with no name, addressed by its collection path alone."""

    name_attribute = None
    singleton = True
