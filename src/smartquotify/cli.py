from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence, TextIO, Tuple

from smartquotify.api import transform
from smartquotify.core.interfaces import LoggerFactoryProtocol
from smartquotify.core.models import QuoteOptions
from smartquotify.logging.factory import DefaultLoggerFactory
from smartquotify.logging.helpers import get_logger
from smartquotify.parsing.parser import _build_parser
from smartquotify.utils.suffixes import markup_for_path


logger = get_logger('cli')

STDIN_TOKEN = '-'


def _configure_logging(enable_json: bool, verbose: bool) -> None:
    """Configure process-wide logging, once per (json, level) mode."""
    level = logging.DEBUG if verbose else logging.INFO
    mode = (bool(enable_json), level)
    prev = getattr(_configure_logging, '_configured_mode', None)
    if prev == mode:
        return
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=level, force=prev is not None)
    global logger
    logger = factory.get_logger('cli')
    setattr(_configure_logging, '_configured_mode', mode)


def _fatal(msg: str, code: int = 2) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def _options_for(ns: argparse.Namespace, path: Optional[Path]) -> QuoteOptions:
    html, markdown = bool(ns.html), bool(ns.markdown)
    if ns.auto and path is not None:
        auto_html, auto_md = markup_for_path(path)
        html, markdown = html or auto_html, markdown or auto_md
    return QuoteOptions(primes=ns.primes, html=html, markdown=markdown)


def _validate(ns: argparse.Namespace, inputs: Sequence[Optional[Path]]) -> None:
    if ns.output and ns.in_place:
        _fatal('--output and --in-place are mutually exclusive')
    if ns.check and (ns.output or ns.in_place):
        _fatal('--check does not write output; drop --output/--in-place')
    if ns.in_place and any(p is None for p in inputs):
        _fatal('--in-place needs file arguments, not standard input')


def _read(path: Optional[Path], encoding: str, stdin: TextIO) -> str:
    try:
        if path is None:
            return stdin.read()
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        _fatal(f'cannot read {path or "<stdin>"}: {exc}')


def _write(path: Path, text: str, encoding: str) -> None:
    try:
        path.write_text(text, encoding=encoding)
    except OSError as exc:
        _fatal(f'cannot write {path}: {exc}')


class SmartQuotify:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> str:
        """Run the tool with an argv-like sequence and return the converted text.

        The result also goes to ``stdout`` (sys.stdout by default) unless
        ``--output``, ``--in-place`` or ``--check`` routes it elsewhere.
        """
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('SMARTQUOTIFY_JSON_LOGS') == '1'
        _configure_logging(json_logs, ns.verbose)

        inputs: List[Optional[Path]] = [
            None if tok == STDIN_TOKEN else Path(tok) for tok in (ns.files or [STDIN_TOKEN])
        ]
        _validate(ns, inputs)

        results: List[Tuple[Optional[Path], str, str]] = []
        for path in inputs:
            original = _read(path, ns.encoding, stdin or sys.stdin)
            opts = _options_for(ns, path)
            converted = transform(original, opts)
            logger.debug(
                'converted %s (html=%s, markdown=%s, primes=%s, changed=%s)',
                path or '<stdin>', opts.html, opts.markdown, opts.primes, converted != original,
            )
            results.append((path, original, converted))

        output = ''.join(converted for _, _, converted in results)

        if ns.check:
            stale = [path for path, original, converted in results if original != converted]
            for path in stale:
                logger.warning('would rewrite %s', path or '<stdin>')
            if stale:
                _fatal(f'{len(stale)} input(s) contain straight quotes', code=1)
            return output

        if ns.in_place:
            for path, original, converted in results:
                if path is not None and original != converted:
                    _write(path, converted, ns.encoding)
                    logger.info('rewrote %s', path)
            return output

        if ns.output:
            _write(Path(ns.output), output, ns.encoding)
            return output

        (stdout or sys.stdout).write(output)
        return output


def main() -> NoReturn:
    """Entry point for the `smartquotify` console script."""
    try:
        SmartQuotify.run(sys.argv[1:])
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
