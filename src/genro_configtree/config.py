# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Config - the root of a configuration tree.

A Config is a ConfigNode that knows how to save itself. Reading and writing
the configuration file is left to the caller, who provides the save routine:

    def write_yaml(config):
        path.write_text(yaml_writer.dump(config))

    config = Config(saver=write_yaml)
    config.set('server.port', 8080)
    config.get_node('server').save()    # reaches the root and calls write_yaml
"""

from __future__ import annotations

from typing import Callable

from loguru import logger

from .exceptions import InvalidStateError
from .tree import ConfigNode

Saver = Callable[['Config'], None]


class Config(ConfigNode):
    """Root node of a configuration tree with a save routine.

    Attributes:
        saver: Callable receiving this Config; performs serialization and
            file writing. Errors it raises propagate from save().
    """

    __slots__ = ('saver',)

    def __init__(self, saver: Saver | None = None) -> None:
        super().__init__()
        self.saver = saver

    def __repr__(self) -> str:
        return f"Config({self._order})"

    def save(self) -> None:
        """Save this configuration through its save routine.

        Raises:
            InvalidStateError: If no save routine was given.
        """
        if self.parent is not None:
            self.root.save()
            return
        if self.saver is None:
            raise InvalidStateError("Config has no save routine")
        logger.debug(f"Saving config ({len(self)} top level nodes)")
        self.saver(self)
