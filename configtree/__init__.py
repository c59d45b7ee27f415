from configtree.settings import get_settings
from configtree.logger import get_logger, init_logger
from configtree.core.enums import WritePolicy, NodeKind
from configtree.core.exceptions import (
    ConfigTreeError, LogicError, InvalidArgumentError, PathIndexError, ConfigurationError
)
from configtree.tree import MISSING, ConfigNode, ScalarNode, MappingNode, SequenceNode
from configtree.registry import ConfigRegistry, get_config_registry, get_instance
from configtree.configurable import Configurable

# Logging is configured by the application through init_logger(get_settings())
logger = get_logger()

__all__ = [
    'Configurable',
    'ConfigRegistry',
    'get_config_registry',
    'get_instance',
    'WritePolicy',
    'NodeKind',
    'MISSING',
    'ConfigNode',
    'ScalarNode',
    'MappingNode',
    'SequenceNode',
    'ConfigTreeError',
    'LogicError',
    'InvalidArgumentError',
    'PathIndexError',
    'ConfigurationError',
    'get_settings',
    'get_logger',
    'init_logger'
]
