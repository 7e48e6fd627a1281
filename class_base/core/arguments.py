"""
Constructor argument normalization.

Every construction path funnels its arguments through fold_config() so that
init() hooks always receive a single mapping, however the caller spelled it:

    Widget.new({'name': 'foo'})      # ready-made mapping, used as-is
    Widget.new('name', 'foo')        # alternating key/value pairs
    Widget.new(name='foo')           # keyword arguments

Folding never fails: malformed argument lists are repaired and logged.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from class_base import config

logger = logging.getLogger(__name__)


def _pair_key(key: Any) -> Any:
    try:
        hash(key)
    except TypeError:
        logger.warning(f"Unhashable constructor argument key {key!r} folded as {str(key)!r}")
        return str(key)
    return key


def fold_config(args: Sequence[Any], kwargs: Optional[Dict[str, Any]] = None) -> Mapping[str, Any]:
    """Normalize constructor arguments into one configuration mapping.

    Args:
        args: Positional arguments. Either a mapping as the first element,
            or a flat sequence of alternating keys and values.
        kwargs: Keyword arguments, merged on top of the positional config.

    Returns:
        The caller's mapping itself when one was passed without keywords,
        otherwise a new dict.
    """
    if args and isinstance(args[0], Mapping):
        folded = args[0]
        if len(args) > 1:
            logger.warning(
                f"Ignoring {len(args) - 1} positional argument(s) after configuration mapping"
            )
    else:
        pairs = list(args)
        if len(pairs) % 2:
            if config.WARN_ODD_PAIRS:
                logger.warning(
                    f"Odd number of constructor arguments, key {pairs[-1]!r} has no value"
                )
            pairs.append(None)
        folded = {_pair_key(key): value for key, value in zip(pairs[0::2], pairs[1::2])}

    if kwargs:
        # Never write into a mapping the caller still owns
        merged = dict(folded)
        merged.update(kwargs)
        return merged

    return folded
