"""
CloudFormation export names.

Export names follow ``{stack-name}-{id}-{qualifier}``, all lowercase. Names
longer than the CloudFormation limit of 256 characters are truncated and
suffixed with a short SHA-256 digest of the full name, so two long names that
only differ past the truncation point still get distinct exports.
"""

import hashlib

from aws_cdk import Stack
from aws_lambda_powertools import Logger

from layered_constructs import constants

logger = Logger()


def _hash_suffix(value: str) -> str:
    digest = hashlib.sha256(value.encode("utf-8")).hexdigest()
    return digest[: constants.EXPORT_NAME_HASH_LENGTH].lower()


def generate_export_name(scope_name: str, resource_id: str, qualifier: str) -> str:
    """
    Build a lowercase, length-bounded export name.

    Args:
        scope_name: Name of the deploying scope, usually the stack name
        resource_id: Construct id of the exported resource
        qualifier: Discriminator for the exported attribute (e.g. "arn", "name", "gsi-0")

    Returns:
        The export name, at most 256 characters long

    Raises:
        ValueError: If any argument is None
    """
    for arg_name, value in (("scope_name", scope_name), ("resource_id", resource_id), ("qualifier", qualifier)):
        if value is None:
            raise ValueError(f"{arg_name} is required")

    separator = constants.EXPORT_NAME_SEPARATOR
    export_name = separator.join([scope_name.lower(), resource_id.lower(), qualifier.lower()])

    if len(export_name) <= constants.EXPORT_NAME_MAX_LENGTH:
        return export_name

    # Hash the untruncated name so the suffix still tells long names apart
    suffix = _hash_suffix(export_name)
    max_base_length = constants.EXPORT_NAME_MAX_LENGTH - len(suffix) - len(separator)
    return f"{export_name[: min(max_base_length, len(export_name))]}{separator}{suffix}"


def create_export_name(stack: Stack, resource_id: str, qualifier: str) -> str:
    """
    Build an export name scoped to ``stack``.

    Args:
        stack: Stack that owns the output
        resource_id: Construct id of the exported resource
        qualifier: Discriminator for the exported attribute

    Returns:
        The export name for ``stack.stack_name``
    """
    export_name = generate_export_name(stack.stack_name, resource_id, qualifier)
    # Lowercasing can lengthen a name, so measure the joined lowercase form
    untruncated_length = len(
        constants.EXPORT_NAME_SEPARATOR.join(part.lower() for part in (stack.stack_name, resource_id, qualifier))
    )
    if untruncated_length > constants.EXPORT_NAME_MAX_LENGTH:
        logger.info(
            "Export name truncated",
            extra={"stack_name": stack.stack_name, "resource_id": resource_id, "export_name": export_name},
        )
    return export_name
