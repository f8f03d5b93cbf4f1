"""Argument parsing functionality for pkgstage."""

import argparse
from constants import Constants


def _add_common_args(parser):
    parser.add_argument("--server",
                        dest="SERVER_URL",
                        help="Controller URL (default: $PKGSTAGE_URL or config file)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level (default: $PKGSTAGE_LOG_LEVEL, then INFO)",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="pkgstage",
        description="pkgstage - stage source and deploy archives for function packages",
        add_help=True,
    )
    subparsers = parser.add_subparsers(dest="action", required=True)

    create = subparsers.add_parser(
        "create",
        help="Resolve inputs into an archive (upload it, or record it in a spec directory)",
    )
    create.add_argument("-s", "--src",
                        dest="SOURCES",
                        help="File, glob or http(s) URL to include; repeatable",
                        action="append", type=str,
                        required=True)
    create.add_argument("--nozip",
                        dest="NO_ZIP",
                        help="Use a single input file as-is instead of zipping it",
                        action="store_true")
    create.add_argument("--spec",
                        dest="SPEC",
                        help="Record an archive upload spec instead of uploading",
                        action="store_true")
    create.add_argument("--specdir",
                        dest="SPEC_DIR",
                        help="Spec directory (default: spec_dir from the config file, then specs)",
                        action="store", type=str,
                        default=None)
    create.add_argument("--specfile",
                        dest="SPEC_FILE",
                        help="Spec file to write, relative to the spec directory "
                             "(default: archive-<first input>.yaml)",
                        action="store", type=str)
    _add_common_args(create)

    consumers = subparsers.add_parser(
        "consumers",
        help="List functions that reference a package",
    )
    consumers.add_argument("-p", "--package",
                           dest="PACKAGE",
                           help="Package name",
                           action="store", type=str,
                           required=True)
    consumers.add_argument("-n", "--namespace",
                           dest="NAMESPACE",
                           help="Package namespace (default: %(default)s)",
                           action="store", type=str,
                           default=Constants.DEFAULT_NAMESPACE)
    _add_common_args(consumers)

    return parser.parse_args(argv)
