"""Conversion of Parameter Store names to flat configuration keys."""

from ..configuration.interfaces import KEY_DELIMITER

PATH_SEPARATOR = '/'


def flatten_name(name: str, delimiter: str = KEY_DELIMITER) -> str:
    """
    Convert a hierarchical parameter name into a flat configuration key.

    Leading and trailing separators are dropped and the remaining ones are
    replaced with ``delimiter``, so ``/app/db/password`` becomes
    ``app:db:password``.
    """
    return name.strip(PATH_SEPARATOR).replace(PATH_SEPARATOR, delimiter)


def list_item_key(key: str, index: int, delimiter: str = KEY_DELIMITER) -> str:
    """Key of the element at ``index`` of an expanded list."""
    return f"{key}{delimiter}{index}"
