from __future__ import annotations

import logging
import weakref
from typing import Iterable

from scorecore.args import Args, check_no_leftover_args, get_string_arg, make_args
from scorecore.logging_utils import designer_context, log_event

logger = logging.getLogger(__name__)


def _weak(target):
    return weakref.ref(target) if target is not None else None


def _deref(ref):
    return ref() if ref is not None else None


class ScoreObject:
    """Base of all score entities. Accepts ``info`` (str); any other leftover key raises InvalidArgument.

    The bag is kind-checked first, so a value outside ArgKind (e.g. a float)
    raises TypeMismatch even under a key nobody consumes.
    """

    def __init__(self, args: Args | None = None) -> None:
        args = make_args(args)
        self._info: list[str] = []
        if "info" in args:
            self._info.append(get_string_arg(args.pop("info"), "info"))
        check_no_leftover_args(args, type(self).__name__)
        log_event(logger, "score_object_created", level=logging.DEBUG, entity=type(self).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(info={self._info!r})"

    def get_info(self) -> list[str]:
        return list(self._info)

    def add_info(self, text: str) -> None:
        self._info.append(text)

    def has_this_info(self, text: str) -> bool:
        return any(entry == text for entry in self._info)


class Item(ScoreObject):
    def __init__(self, args: Args | None = None) -> None:
        # Item has no arguments of its own, so the bag goes up unreduced.
        super().__init__(args)
        self._parameters: list[Parameter] = []
        self._container: weakref.ref[Container] | None = None

    def get_parameters(self) -> list[Parameter]:
        return list(self._parameters)

    def get_container(self) -> Container | None:
        return _deref(self._container)

    def set_container(self, container: Container | None) -> None:
        self._container = _weak(container)

    def bilink_parameters(self, parameters: Iterable[Parameter]) -> None:
        # Designer-only; relinking a parameter silently overwrites its item.
        with designer_context(type(self).__name__):
            linked = 0
            for parameter in parameters:
                self._parameters.append(parameter)
                parameter.set_item(self)
                linked += 1
            log_event(
                logger,
                "parameters_bilinked",
                level=logging.DEBUG,
                entity=type(self).__name__,
                linked=linked,
                parameter_count=len(self._parameters),
            )


class Parameter(ScoreObject):
    def __init__(self, args: Args | None = None) -> None:
        super().__init__(args)
        self._item: weakref.ref[Item] | None = None

    def get_item(self) -> Item | None:
        return _deref(self._item)

    def set_item(self, item: Item | None) -> None:
        self._item = _weak(item)
        log_event(logger, "parameter_item_set", level=logging.DEBUG, entity=type(self).__name__)


class Container(Item):
    pass
