"""Application factory - Builds and runs the attribute editor.

Wires the platform attribute provider, the locality checker, the user
configuration and the Qt interaction adapter into a ChattrCommand, and
provides the `attredit` command line entry point.

Author: Michael Economou
Date: 2026-02-02
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import TYPE_CHECKING

from attredit import __version__
from attredit.config import APP_NAME
from attredit.core.attributes.errors import ChattrError, describe_os_error
from attredit.domain.attributes import AttributeCatalog
from attredit.infra.filesystem import PsutilLocalityChecker, get_attribute_provider
from attredit.models.file_listing import FileListing
from attredit.utils.logging.logger_factory import get_cached_logger
from attredit.utils.logging.logger_setup import ConfigureLogger
from attredit.utils.paths import AppPaths
from attredit.utils.shared.json_config_manager import get_app_config_manager

if TYPE_CHECKING:
    from attredit.app.ports import AttributeProviderPort
    from attredit.core.chattr_command import ChattrResult
    from attredit.utils.shared.json_config_manager import JSONConfigManager

logger = get_cached_logger(__name__)


def build_catalog(provider: AttributeProviderPort, hidden_codes: set[str]) -> AttributeCatalog:
    """Catalog of the provider's attributes minus the ones the user hid."""
    catalog = AttributeCatalog(provider.describe_attributes())
    if hidden_codes:
        catalog = catalog.without(hidden_codes)
    logger.debug(
        "[boot] Catalog: %d attributes (%d mutable)",
        len(catalog),
        len(catalog.mutable()),
        extra={"dev_only": True},
    )
    return catalog


def print_attributes(
    provider: AttributeProviderPort,
    catalog: AttributeCatalog,
    paths: list[str],
    placeholder: str,
) -> int:
    """Print "<preview> <path>" for every path, like lsattr.

    Returns:
        0 when every file could be read, 1 otherwise.

    """
    status = 0
    for path in paths:
        try:
            flags = provider.read_flags(path)
        except OSError as e:
            print(f'Cannot get flags of "{path}": {describe_os_error(e)}', file=sys.stderr)
            status = 1
            continue
        print(f"{catalog.format_flags(flags, placeholder)} {path}")
    return status


def run_chattr(
    provider: AttributeProviderPort,
    catalog: AttributeCatalog,
    paths: list[str],
    placeholder: str,
    config_manager: JSONConfigManager,
) -> ChattrResult:
    """Start Qt and run the chattr command over `paths`."""
    from attredit.core.chattr_command import ChattrCommand
    from attredit.core.pyqt_imports import QApplication
    from attredit.ui.adapters.qt_user_interaction import QtInteractionAdapter

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)

    # Several paths behave like a panel with every entry marked
    listing = FileListing.from_paths(paths, mark_all=len(paths) > 1)
    command = ChattrCommand(
        provider=provider,
        interaction=QtInteractionAdapter(config_manager=config_manager),
        listing=listing,
        catalog=catalog,
        locality_checker=PsutilLocalityChecker(),
        placeholder=placeholder,
    )
    return command.run()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="View and change file attribute flags (chattr).",
    )
    parser.add_argument("paths", nargs="+", metavar="PATH", help="files to edit")
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="print the attribute preview of each file and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Command line entry point. Returns the process exit code."""
    args = parse_args(argv)

    ConfigureLogger(
        log_name=APP_NAME,
        log_dir=str(AppPaths.get_logs_dir()),
        console_enabled=not args.print_only,
    )
    logger.info(
        "[boot] %s %s started at %s",
        APP_NAME,
        __version__,
        time.strftime("%Y-%m-%d %H:%M:%S", time.localtime()),
    )

    config_manager = get_app_config_manager()
    attributes_config = config_manager.get_category("attributes", create_if_not_exists=True)
    placeholder = attributes_config.placeholder()

    try:
        provider = get_attribute_provider()
    except ChattrError as e:
        logger.error("[boot] %s", e)
        print(str(e), file=sys.stderr)
        return 1

    catalog = build_catalog(provider, attributes_config.hidden_codes())

    if args.print_only:
        return print_attributes(provider, catalog, args.paths, placeholder)

    result = run_chattr(provider, catalog, args.paths, placeholder, config_manager)
    config_manager.save()
    return 1 if result.error else 0
