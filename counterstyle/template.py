r"""
Helpers to join counter styles with literal text, e.g. to produce labels such
as ``"(iv)"`` or ``"3.c"``.
"""

import re

import logging
logger = logging.getLogger(__name__)


def sty(*parts):
    r"""
    Return a formatter that concatenates the given `parts` for an index.  Each
    part is either a literal string, or a callable (such as a
    :py:class:`~counterstyle.counterstyle.CounterStyle`) that is called with
    the index::

        >>> paren_roman = sty('(', lower_roman, ')')
        >>> paren_roman(4)
        '(iv)'
    """
    for part in parts:
        if not isinstance(part, str) and not callable(part):
            raise ValueError(
                f"Invalid template part ‘{repr(part)}’, expected a string or a callable"
            )
    parts = tuple(parts)

    def _sty_formatter(index):
        return "".join([
            (part if isinstance(part, str) else part(index))
            for part in parts
        ])

    return _sty_formatter


_rx_dollar_template = re.compile(r'\$\{([a-zA-Z0-9_.-]+)\}')


def parse_template(template, named_styles):
    r"""
    Parse a template string such as ``'${upper-roman}.${lower-alpha}'`` into a
    formatter.  Each ``${name}`` is replaced by the label produced by the
    style `named_styles[name]` for the given index.

    The `named_styles` argument is a mapping of style names to counter
    styles, e.g. a :py:class:`~counterstyle.config.CounterStyleRegistry`.
    """
    parts = []
    pos = 0
    for m in _rx_dollar_template.finditer(template):
        if m.start() > pos:
            parts.append(template[pos:m.start()])
        name = m.group(1)
        try:
            parts.append(named_styles[name])
        except KeyError:
            raise ValueError(
                f"Unknown counter style ‘{name}’ in template ‘{template}’"
            )
        pos = m.end()
    if pos < len(template):
        parts.append(template[pos:])
    logger.debug("Parsed template %r into %d part(s)", template, len(parts))
    return sty(*parts)


def parse_tag_template(tag_template, initials_styles=None):
    r"""
    Parse a LaTeX ``enumerate``-like tag template, such as ``'(a)'`` or
    ``'i.'``.  The first character that is one of the keys of
    `initials_styles` (by default ``1``, ``a``, ``A``, ``i``, ``I``) is
    replaced by the corresponding counter style.  If there is no such
    character, the template is used verbatim for all indices (e.g., a bullet
    symbol).
    """
    if initials_styles is None:
        initials_styles = _get_standard_initials_styles()
    rx = re.compile(r'[' + ''.join([re.escape(k) for k in initials_styles.keys()]) + r']')
    m = rx.search(tag_template)
    if m is not None:
        # substitute a counter
        left = tag_template[:m.start()]
        right = tag_template[m.end():]
        return sty(left, initials_styles[m.group()], right)

    # no counter. E.g., a bullet symbol
    return lambda index: tag_template


def _get_standard_initials_styles():
    from .predefined import standard_counter_styles, abbreviations
    return {
        initial: standard_counter_styles[name]
        for (initial, name) in abbreviations.items()
    }


def parse_counter_style(spec, named_styles=None, use_tag_template=False):
    r"""
    Return a formatter from a flexible specification `spec`:

    - a callable is returned as is;

    - a string that names a style in `named_styles` (by default, the
      standard predefined styles) returns that style;

    - a mapping ``{'template': <template>}`` is parsed with
      :py:func:`parse_template`;

    - if `use_tag_template` is true, any other string is parsed with
      :py:func:`parse_tag_template`.
    """
    if named_styles is None:
        from .predefined import standard_counter_styles
        named_styles = standard_counter_styles

    if callable(spec):
        return spec
    if isinstance(spec, str):
        if spec in named_styles:
            return named_styles[spec]
        if use_tag_template:
            return parse_tag_template(spec)
    elif isinstance(spec, dict) and 'template' in spec:
        return parse_template(spec['template'], named_styles)

    raise ValueError(f"Invalid counter style specification: ‘{repr(spec)}’")
