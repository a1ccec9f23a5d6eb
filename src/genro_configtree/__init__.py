# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-ConfigTree - Path-addressable configuration trees.

A small library representing a configuration document as a tree of named
nodes holding string-encoded values, child nodes and comments. It provides
dotted-path navigation, on-demand node creation, node moves, and the two
merges used when a user's configuration is upgraded with new defaults.

Logging goes through loguru and is disabled by default; enable it with
``logger.enable("genro_configtree")``.
"""

__version__ = "0.1.0"

from loguru import logger

from .codecs import (
    BooleanCodec,
    IntegerCodec,
    LongCodec,
    StringCodec,
    StringListCodec,
    ValueCodec,
    codec_for,
    register_codec,
)
from .config import Config
from .exceptions import (
    ConfigTreeError,
    InvalidPathError,
    InvalidStateError,
    ValueDecodeError,
)
from .tree import ConfigNode, load_from_dict, load_from_list

logger.disable(__name__)

__all__ = [
    # Core classes
    "ConfigNode",
    "Config",
    # Loading
    "load_from_dict",
    "load_from_list",
    # Codecs
    "ValueCodec",
    "StringCodec",
    "IntegerCodec",
    "LongCodec",
    "BooleanCodec",
    "StringListCodec",
    "codec_for",
    "register_codec",
    # Exceptions
    "ConfigTreeError",
    "InvalidPathError",
    "InvalidStateError",
    "ValueDecodeError",
]
