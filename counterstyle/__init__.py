r"""
Render integer indices as list markers and outline numbers, using composable
counter styles that follow the semantics of CSS ``@counter-style`` rules.
"""

__version__ = '0.1.0'

from .counterstyle import (
    CounterStyle,
    cyclic,
    fixed,
    symbolic,
    alphabetic,
    numeric,
    additive,
)

from .template import (
    sty,
    parse_template,
    parse_tag_template,
    parse_counter_style,
)

from .predefined import (
    standard_counter_styles,
    decimal,
    decimal_leading_zero,
    lower_roman,
    upper_roman,
    lower_alpha,
    upper_alpha,
)

from .config import (
    build_counter_style,
    CounterStyleRegistry,
)
