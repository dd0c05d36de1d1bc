"""
Configuration API messages handling.

Every object returned by the Configuration API carries a messages block
with notifications and required actions (for example "restart the server
for this change to take effect"). Both are logged and kept in state.
"""

import logging
from typing import Any

from pingdirectory_provider.constants import MESSAGES_SCHEMA_URN
from pingdirectory_provider.models.api import Messages, RequiredAction

logger = logging.getLogger(__name__)


def read_messages(
    response: dict[str, Any],
) -> tuple[set[str], list[RequiredAction]]:
    """
    Extract notifications and required actions from an API response.

    Args:
        response: Configuration object as returned by the server

    Returns:
        Tuple of (notifications, required actions), both empty when the
        response has no messages block
    """
    block = response.get(MESSAGES_SCHEMA_URN)
    if not block:
        return set(), []

    messages = Messages.model_validate(block)
    for notification in messages.notifications:
        logger.warning(f"Configuration API Notification: {notification}")
    for action in messages.required_actions:
        logger.warning(
            f"Configuration API RequiredAction with property: {action.property_name}, "
            f"type: {action.type}, synopsis: {action.synopsis}"
        )
    return set(messages.notifications), list(messages.required_actions)
