"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ams.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork
from ams.infrastructure.settings import Settings


def settings() -> Settings:
    return Settings.from_env()


def unit_of_work() -> JsonUnitOfWork:
    return JsonUnitOfWork(settings().data_dir)
