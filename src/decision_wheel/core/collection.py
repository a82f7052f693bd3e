from __future__ import annotations

import logging

from .errors import InputClosedError
from .interfaces import Presenter
from .models import MAX_OPTIONS, MIN_OPTIONS, OptionSet, is_blank

logger = logging.getLogger(__name__)


def parse_count(raw: str, low: int = MIN_OPTIONS, high: int = MAX_OPTIONS) -> int | None:
    """Return the option count in ``raw`` or None when it is not a valid one."""

    text = raw.strip()
    if "_" in text:
        return None
    try:
        value = int(text)
    except ValueError:
        return None
    if low <= value <= high:
        return value
    return None


def _read_count(presenter: Presenter) -> int:
    while True:
        try:
            raw = presenter.read_count(MIN_OPTIONS, MAX_OPTIONS)
        except EOFError as exc:
            raise InputClosedError("the option count") from exc
        count = parse_count(raw)
        if count is not None:
            return count
        logger.debug("Rejected option count %r", raw)
        presenter.reject_count(raw, MIN_OPTIONS, MAX_OPTIONS)


def _read_option(presenter: Presenter, position: int) -> str:
    retry = False
    while True:
        try:
            raw = presenter.read_option(position, retry)
        except EOFError as exc:
            raise InputClosedError(f"option {position}") from exc
        if not is_blank(raw):
            return raw
        logger.debug("Rejected blank option %d", position)
        presenter.reject_option(position)
        retry = True


def collect_options(presenter: Presenter) -> OptionSet:
    """Interactively gather a valid option set, re-prompting until it is one."""

    count = _read_count(presenter)
    presenter.start_options(count)
    labels = [_read_option(presenter, position) for position in range(1, count + 1)]
    options = OptionSet.of(labels)
    logger.debug("Collected %d options", len(options))
    presenter.options_collected(options)
    return options
