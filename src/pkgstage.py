"""pkgstage - stage function source and deploy archives

    Returns:
        int: Exit code
"""
import json
import logging
import sys

from archive.create import create_archive
from archive.naming import kubify_name
from args import parse_args
from cli_config import apply_server_overrides, load_config
from common.errors import StageError, TransportError
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from controller.client import ControllerClient
from controller.functions import get_functions_by_package

logger = logging.getLogger(__name__)


def default_spec_file(sources):
    """Spec file name derived from the first input, e.g. archive-fn-js.yaml."""
    stem = kubify_name(sources[0]) if sources else ""
    return f"archive-{stem or 'inputs'}.yaml"


def run_create(args):
    """Resolve the create command's inputs and print the archive descriptor as JSON."""
    spec_file = None
    if args.SPEC:
        spec_file = args.SPEC_FILE or default_spec_file(args.SOURCES)
    client = None if spec_file else ControllerClient(Constants.SERVER_URL)

    archive = create_archive(
        client,
        args.SOURCES,
        no_zip=args.NO_ZIP,
        spec_dir=args.SPEC_DIR or Constants.SPEC_DIR,
        spec_file=spec_file,
    )
    print(json.dumps(archive.to_dict(), indent=2))


def run_consumers(args):
    """Print the names of functions that use the given package."""
    client = ControllerClient(Constants.SERVER_URL)
    fns = get_functions_by_package(client, args.PACKAGE, args.NAMESPACE)
    if not fns:
        logger.info("No functions reference package %s in namespace %s", args.PACKAGE, args.NAMESPACE)
    for fn in fns:
        print(fn.name)


ACTIONS = {
    "create": run_create,
    "consumers": run_consumers,
}


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, getattr(args, "LOG_FILE", None))
    load_config()
    apply_server_overrides(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.action)
        )

    try:
        ACTIONS[args.action](args)
    except TransportError as exc:
        logger.error("%s", exc)
        sys.exit(ExitCodes.CONNECTION_ERROR.value)
    except StageError as exc:
        logger.error("%s", exc)
        sys.exit(ExitCodes.FILE_ERROR.value)

    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
