"""Error catalog discovery.

Given an importable module (or package), the reader returns the documentation
of every documented error declared in it:

1. Import the module and, for a package, every submodule, so that exception
   classes are defined and their documented factories are recorded in the
   documentation link table.
2. Keep the link table entries whose concrete exception class lives in that
   module tree.
3. Call each linked documentation method, keep results that are
   ErrorDocumentation and stamp them with exception type, error source and
   factory name.
4. Sort by code, case-insensitively.

The scan is tolerant: a link naming a missing method, an instance method, or a
method returning something else than an ErrorDocumentation, is skipped. A
documentation method that raises, or a submodule that fails to import, is
governed by FailureBehavior: CONTINUE logs a warning and skips, STOP raises
CatalogGenerationError.

Nothing is cached; scanning the same module twice gives equal catalogs.

Usage:
    from diagnosable_exceptions.application.catalog import discover, discover_many

    catalog = discover("billing.errors")
    for documentation in catalog:
        print(documentation.code, documentation.title)

    catalog = discover_many(["billing", "shipping"])
"""

import importlib
import inspect
import pkgutil
from collections.abc import Callable, Iterable
from dataclasses import replace
from types import ModuleType

from diagnosable_exceptions.application.catalog.errors import CatalogGenerationError
from diagnosable_exceptions.core.config import get_settings
from diagnosable_exceptions.core.container import get_logger
from diagnosable_exceptions.core.enums import FailureBehavior
from diagnosable_exceptions.core.result import Failure, Result, Success
from diagnosable_exceptions.domain.documentation.models import ErrorDocumentation
from diagnosable_exceptions.domain.exceptions.diagnosable_exception import (
    DiagnosableException,
)
from diagnosable_exceptions.domain.exceptions.links import (
    DOCUMENTATION_LINKS,
    DocumentationLinkTable,
    DocumentedFactory,
)
from diagnosable_exceptions.domain.protocols.logger_protocol import LoggerProtocol

type ModuleRef = ModuleType | str


def sort_catalog(documentations: Iterable[ErrorDocumentation]) -> list[ErrorDocumentation]:
    """Order documentations by code, ignoring case. Stable for equal codes."""
    return sorted(documentations, key=lambda documentation: documentation.code.upper())


def _call(method: Callable[[], object]) -> Result[object, Exception]:
    try:
        return Success(value=method())
    except Exception as exc:
        return Failure(error=exc)


def _qualified_name(klass: type) -> str:
    return f"{klass.__module__}.{klass.__qualname__}"


class ErrorCatalogReader:
    """Discover the documented errors of importable modules.

    Args:
        logger: Logger; the container's logger when None.
        failure_behavior: What to do when a module or documentation method
            fails; ``Settings.failure_behavior`` when None.
        walk_packages: Import the submodules of a package before scanning it;
            ``Settings.walk_packages`` when None.
        links: Documentation link table to read; the process-wide table when
            None.
    """

    def __init__(
        self,
        *,
        logger: LoggerProtocol | None = None,
        failure_behavior: FailureBehavior | None = None,
        walk_packages: bool | None = None,
        links: DocumentationLinkTable | None = None,
    ) -> None:
        current = get_settings()
        self._logger = logger if logger is not None else get_logger()
        self._failure_behavior = (
            failure_behavior if failure_behavior is not None else current.failure_behavior
        )
        self._walk_packages = (
            walk_packages if walk_packages is not None else current.walk_packages
        )
        self._links = links if links is not None else DOCUMENTATION_LINKS

    @property
    def failure_behavior(self) -> FailureBehavior:
        return self._failure_behavior

    def discover(self, module: ModuleRef) -> list[ErrorDocumentation]:
        """Documentation of every documented error declared in ``module``.

        Args:
            module: Module object or dotted module name. Packages include
                their submodules.

        Returns:
            Documentations sorted by code (case-insensitive).

        Raises:
            CatalogGenerationError: Under FailureBehavior.STOP, when the
                module, a submodule or a documentation method fails.
        """
        return sort_catalog(self._scan(module))

    def discover_many(self, modules: Iterable[ModuleRef]) -> list[ErrorDocumentation]:
        """Merged catalog of several modules.

        Factories reached through more than one module (overlapping packages)
        appear once.

        Args:
            modules: Module objects or dotted names.

        Returns:
            Documentations sorted by code (case-insensitive).
        """
        seen: set[tuple[type, str | None]] = set()
        merged: list[ErrorDocumentation] = []
        for module in modules:
            for documentation in self._scan(module):
                identity = (documentation.exception_type, documentation.factory_method_name)
                if identity in seen:
                    continue
                seen.add(identity)
                merged.append(documentation)
        return sort_catalog(merged)

    # =========================================================================
    # Scan
    # =========================================================================

    def _scan(self, module: ModuleRef) -> list[ErrorDocumentation]:
        root = self._import(module)
        if root is None:
            return []

        logger = self._logger.bind(module=root.__name__)
        logger.info("error_catalog_scan_started")

        if self._walk_packages and hasattr(root, "__path__"):
            self._import_submodules(root)

        documentations = [
            documentation
            for entry in self._links.factories()
            if self._is_in_scope(entry.exception_type, root.__name__)
            if (documentation := self._document(entry, root.__name__, logger)) is not None
        ]

        logger.info("error_catalog_scan_finished", documentation_count=len(documentations))
        return documentations

    def _import(self, module: ModuleRef) -> ModuleType | None:
        if isinstance(module, ModuleType):
            return module
        try:
            return importlib.import_module(module)
        except Exception as exc:
            self._handle_failure("error_catalog_module_import_failed", exc, module=module)
            return None

    def _import_submodules(self, package: ModuleType) -> None:
        for info in pkgutil.iter_modules(package.__path__, prefix=f"{package.__name__}."):
            submodule = self._import(info.name)
            if submodule is not None and info.ispkg:
                self._import_submodules(submodule)

    @staticmethod
    def _is_in_scope(exception_type: type, module_name: str) -> bool:
        if not issubclass(exception_type, DiagnosableException) or exception_type.is_abstract():
            return False
        declared_in = exception_type.__module__
        return declared_in == module_name or declared_in.startswith(f"{module_name}.")

    def _document(
        self, entry: DocumentedFactory, module_name: str, logger: LoggerProtocol
    ) -> ErrorDocumentation | None:
        exception_type = entry.exception_type
        context = {
            "exception_type": _qualified_name(exception_type),
            "factory": entry.factory_name,
            "documentation_method": entry.documentation_method_name,
        }

        member = inspect.getattr_static(exception_type, entry.documentation_method_name, None)
        if member is None:
            logger.debug("documentation_link_skipped", reason="method_not_found", **context)
            return None
        # Documentation methods are called without an instance.
        if not isinstance(member, (staticmethod, classmethod)):
            logger.debug("documentation_link_skipped", reason="method_not_static", **context)
            return None
        method = getattr(exception_type, entry.documentation_method_name)

        match _call(method):
            case Failure(error=error):
                self._handle_failure(
                    "documentation_method_failed",
                    error,
                    logger=logger,
                    module=module_name,
                    **context,
                )
                return None
            case Success(value=result) if isinstance(result, ErrorDocumentation):
                logger.debug("documented_factory_found", code=result.code, **context)
                return replace(
                    result,
                    exception_type=exception_type,
                    error_source=self._links.error_source_for(exception_type),
                    factory_method_name=entry.factory_name,
                )
            case Success(value=result):
                logger.debug(
                    "documentation_link_skipped",
                    reason="not_error_documentation",
                    returned_type=type(result).__name__,
                    **context,
                )
        return None

    def _handle_failure(
        self,
        event: str,
        error: Exception,
        *,
        logger: LoggerProtocol | None = None,
        **context: str,
    ) -> None:
        logger = logger or self._logger
        if self._failure_behavior is FailureBehavior.CONTINUE:
            logger.warning(
                event,
                error_type=type(error).__name__,
                error_message=str(error),
                **context,
            )
            return

        logger.error(event, error=error, **context)
        module = context.get("module")
        description = ", ".join(f"{key}={value}" for key, value in context.items())
        raise CatalogGenerationError(
            f"Error catalog generation stopped: {event.replace('_', ' ')} ({description}).",
            module=module,
        ) from error


def discover(
    module: ModuleRef, *, failure_behavior: FailureBehavior | None = None
) -> list[ErrorDocumentation]:
    """Discover one module with a default reader. See ErrorCatalogReader.discover."""
    return ErrorCatalogReader(failure_behavior=failure_behavior).discover(module)


def discover_many(
    modules: Iterable[ModuleRef], *, failure_behavior: FailureBehavior | None = None
) -> list[ErrorDocumentation]:
    """Discover several modules with a default reader. See ErrorCatalogReader.discover_many."""
    return ErrorCatalogReader(failure_behavior=failure_behavior).discover_many(modules)
