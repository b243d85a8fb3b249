"""Utilities for declaratively registering application modules.

Each feature module exposes a ``setup_module(app)`` hook that registers its
blueprint, error handlers and template filters. The registry describes those
modules with metadata so the application factory can wire them in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from flask import Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class ModuleDefinition:
    """Describe how a feature module is set up on the app."""

    import_path: str
    attribute: str = "setup_module"
    version: str = "1.0"

    def load_setup(self) -> Callable[[Flask], None]:
        """Import and return the setup hook described by this definition."""

        module = import_string(self.import_path)
        setup = getattr(module, self.attribute, None)
        if not callable(setup):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a callable setup hook, got %r instead"
                % (self.attribute, self.import_path, type(setup))
            )
        return setup


def setup_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    """Run the setup hook of every module in the provided iterable."""

    for module in modules:
        setup = module.load_setup()
        setup(app)
        app.logger.debug(
            "Registered module %s (version %s)",
            module.import_path,
            module.version,
        )


def register_default_modules(app: Flask) -> None:
    """Convenience helper that registers the built-in Book Exchange modules."""

    setup_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("bookexchange_app.modules.book_covers", version="3.0"),
)
