"""One-pass numeric summaries built from fused folds."""
import logging
from typing import Optional

import pystache
from marshmallow.fields import Float, Integer
from toolz.dicttoolz import valmap

from folding import combinators
from folding.capabilities import Numeric, FLOATS
from folding.fold import Fold, lift
from folding.general.functional import option
from folding.general.model import JsonCodec, build, codec, optional, required


logger = logging.getLogger(__name__)


Summary, SummarySchema = build('Summary', {
    'length' : required(Integer),
    'sum'    : required(Float  ),
    'mean'   : optional(Float  ),
    'minimum': optional(Float  ),
    'maximum': optional(Float  ),
    'first'  : optional(Float  ),
    'last'   : optional(Float  )
})
SummaryCodec: JsonCodec[Summary] = codec(SummarySchema())


DEFAULT_TEMPLATE = (
    'length:  {{length}}\n'
    'sum:     {{sum}}\n'
    'mean:    {{mean}}\n'
    'minimum: {{minimum}}\n'
    'maximum: {{maximum}}\n'
    'first:   {{first}}\n'
    'last:    {{last}}'
)

_ABSENT = 'n/a'


def _summary(total, length: int, smallest, largest, first, last) -> Summary:
    return Summary(
        length  = length,
        sum     = total,
        mean    = total / length if length else None,
        minimum = smallest,
        maximum = largest,
        first   = first,
        last    = last
    )


def summarize(numeric: Numeric = FLOATS) -> Fold[float, Summary]:
    """A fold computing every field of a :class:`Summary` in a single traversal."""
    return lift(
        _summary,
        combinators.sum(numeric),
        combinators.length(),
        combinators.minimum(),
        combinators.maximum(),
        combinators.head(),
        combinators.last()
    )


def render(summary: Summary, template: Optional[str] = None) -> str:
    """Render `summary` through a mustache template. Absent values are shown as ``n/a``."""
    context = valmap(
        option.or_else(_ABSENT),
        SummaryCodec.encode(summary)
    )
    logger.debug('Rendering summary %s', context)
    return pystache.render(template or DEFAULT_TEMPLATE, context)
