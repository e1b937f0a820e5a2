"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from pandagen.core.contracts.exceptions import CancellationError, PandagenError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    import pandagen.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        return cli.run_create(args)
    except CancellationError as exc:
        cli.print_cancelled(cli.make_console(stderr=True), str(exc))
        return 2
    except KeyboardInterrupt:
        cli.print_cancelled(cli.make_console(stderr=True), str(CancellationError()))
        return 2
    except PandagenError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - last-resort mapping
        logger.debug("unexpected failure", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
