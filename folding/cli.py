import json
import logging
import math
import sys
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple

from configargparse import ArgParser
from toolz.functoolz import excepts
from toolz.itertoolz import concat

from folding import summary
from folding.general.functional.error_handling import throw


logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """A token of the input could not be read as a finite number."""

    def __init__(self, token: str, position: int) -> None:
        super().__init__(f'Token {position} ("{token}") is not a finite number')
        self.token    = token
        self.position = position


def argument_parser() -> ArgParser:
    parser = ArgParser(
        prog        = 'folding-summary',
        description = 'Summarize a whitespace-separated stream of numbers in a single pass.'
    )
    parser.add_argument(
        '--input',
        env_var = 'FOLDING_INPUT',
        default = '-',
        help    = 'File to read numbers from, "-" for standard input'
    )
    parser.add_argument(
        '--format',
        env_var = 'FOLDING_FORMAT',
        default = 'json',
        choices = ['json', 'text'],
        help    = 'Output format'
    )
    parser.add_argument(
        '--template',
        env_var = 'FOLDING_TEMPLATE',
        default = None,
        help    = 'Path to a mustache template used by the text format'
    )
    parser.add_argument(
        '--verbosity',
        env_var = 'FOLDING_VERBOSITY',
        default = logging.getLevelName(logging.WARNING),
        help    = f'Logging verbosity. One of: {",".join(logging._nameToLevel.keys())}',
        type    = lambda level: logging._nameToLevel[level.upper()]
    )
    return parser


def tokens(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Number every whitespace-separated token of `lines`, starting at 1."""
    return enumerate(concat(line.split() for line in lines), 1)


def _parse(numbered: Tuple[int, str]) -> float:
    position, token = numbered
    value = excepts(ValueError, float, lambda _: None)(token)
    return (
        value if value is not None and math.isfinite(value) else
        throw(InvalidInput(token, position))
    )


def summarize_lines(lines: Iterable[str]) -> summary.Summary:
    """Summarize the numbers found in `lines`, reading them lazily in one pass.

    Raises:
        InvalidInput: If a token is not a finite number.
    """
    return summary.summarize().premap(_parse).fold(tokens(lines))


def _read(path: str, stdin: TextIO) -> summary.Summary:
    if path == '-':
        return summarize_lines(stdin)
    with open(path, encoding='utf-8') as source:
        return summarize_lines(source)


def _template(path: Optional[str]) -> Optional[str]:
    if path is None:
        return None
    with open(path, encoding='utf-8') as source:
        return source.read()


def _format(result: summary.Summary, output_format: str, template: Optional[str]) -> str:
    return (
        json.dumps(summary.SummaryCodec.encode(result), sort_keys=True, allow_nan=False) if output_format == 'json' else
        summary.render(result, template)
    )


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    args   = argument_parser().parse_args(argv)
    stdin  = stdin  or sys.stdin
    stdout = stdout or sys.stdout

    logging.basicConfig()
    logging.getLogger('folding').setLevel(args.verbosity)
    logger.debug('Summarizing %s as %s', args.input, args.format)

    try:
        template = _template(args.template)
        result   = _read(args.input, stdin)
    except InvalidInput as error:
        logger.error('Invalid input: %s', error)
        return 2
    except UnicodeDecodeError as error:
        logger.error('Input is not valid %s: %s', error.encoding, error.reason)
        return 2
    except OSError as error:
        logger.error('Could not read %s', error.filename)
        return 2

    logger.debug('Read %d numbers', result.length)
    try:
        output = _format(result, args.format, template)
    except ValueError as error:
        logger.error('Summary cannot be written: %s', error)
        return 2

    stdout.write(output + '\n')
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == '__main__':
    run()
