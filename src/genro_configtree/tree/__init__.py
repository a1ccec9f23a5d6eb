# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfigTree package - Path-addressable configuration nodes.

The package is organized into:
- core: ConfigNode with navigation, structural changes and merges
- access: Typed getters and set() built on the value codecs
- loading: Functions populating a tree from dict or list data

Example:
    >>> from genro_configtree import ConfigNode
    >>> root = ConfigNode()
    >>> root.set('database.port', 5432)
    >>> root.get_integer('database.port')
    5432
"""

from .core import ConfigNode
from .loading import load_from_dict, load_from_list

__all__ = ["ConfigNode", "load_from_dict", "load_from_list"]
