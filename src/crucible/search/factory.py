"""
Strategy Registry Module - Named lookup of search strategies.

Strategy modules register themselves on import:

    @register_strategy
    class AStarStrategy(SearchStrategy):
        name = "astar"
"""

from typing import Dict, List, Type

from .base import SearchStrategy
from .errors import ConfigError

DEFAULT_STRATEGY = "astar"

_STRATEGIES: Dict[str, Type[SearchStrategy]] = {}


def register_strategy(cls: Type[SearchStrategy]) -> Type[SearchStrategy]:
    """Class decorator adding a strategy under its name attribute."""
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str) -> SearchStrategy:
    """
    Instantiate the strategy registered under name.

    Raises:
        ConfigError: If no strategy has that name
    """
    try:
        strategy_cls = _STRATEGIES[name]
    except KeyError:
        known = ", ".join(get_strategy_names())
        raise ConfigError(f"Unknown strategy {name!r} (known: {known})") from None
    return strategy_cls()


def get_strategy_names() -> List[str]:
    """Registered strategy names, sorted."""
    return sorted(_STRATEGIES)


def get_default_strategy_name() -> str:
    """The A* strategy when registered, otherwise the first name."""
    if DEFAULT_STRATEGY in _STRATEGIES or not _STRATEGIES:
        return DEFAULT_STRATEGY
    return get_strategy_names()[0]
