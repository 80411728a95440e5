r"""
Composable counter styles, modelled on CSS ``@counter-style`` rules.

A :py:class:`CounterStyle` is an immutable callable that turns an integer
index into a label.  Styles are built with one of the primitive constructors
(:py:func:`cyclic`, :py:func:`fixed`, :py:func:`symbolic`,
:py:func:`alphabetic`, :py:func:`numeric`, :py:func:`additive`) and refined by
chaining decorators, each of which returns a new style::

    >>> roman = additive({1000: 'M', 900: 'CM', 500: 'D', 400: 'CD',
    ...                   100: 'C', 90: 'XC', 50: 'L', 40: 'XL',
    ...                   10: 'X', 9: 'IX', 5: 'V', 4: 'IV', 1: 'I'})
    >>> roman = roman.range(1, 3999)
    >>> roman(2024)
    'MMXXIV'
    >>> roman(4000)
    '4000'
"""


def _default_fallback(index):
    return str(index)


def _pad(original, length, pad, left):
    if original is None:
        return None
    missing = length - len(original)
    if missing <= 0:
        return original
    # repeat the pad unit enough times, then cut to the exact missing width
    padding = (pad * (-(-missing // len(pad))))[:missing]
    if left:
        return padding + original
    return original + padding


def _check_symbols(constructor, symbols, min_count=1):
    if len(symbols) < min_count:
        raise ValueError(
            f"{constructor}() requires at least {min_count} symbol(s), "
            f"got ‘{repr(symbols)}’"
        )
    for symbol in symbols:
        if not isinstance(symbol, str):
            raise ValueError(
                f"{constructor}(): invalid symbol ‘{repr(symbol)}’, expected a string"
            )
    return tuple(symbols)


def _expect_int(v, what='value'):
    # accepts integers and strings that spell out an integer, never floats
    if isinstance(v, int) and not isinstance(v, bool):
        return v
    if isinstance(v, str):
        try:
            return int(v)
        except ValueError:
            pass
    raise ValueError(f"Invalid {what} ‘{repr(v)}’, expected an integer")


class CounterStyle:
    r"""
    An immutable mapping from integer indices to labels.

    - `render_fn` is the core renderer, called as ``render_fn(index,
      decorator_length)``.  It returns a string, or `None` if the index cannot
      be represented by this style.

    - `fallback` is a callable ``fallback(index) -> str`` that is used when
      the core renderer returns `None`.  By default the index is written out
      with plain decimal digits.

    Calling the style, as in ``style(index)``, never raises for an integer
    index: indices that the style cannot represent are rendered by the
    fallback.

    The `decorator_length` argument of the core renderer is the number of
    characters that outer decorators (e.g. a negative sign) are going to add
    around the rendered text.  Padding decorators take it into account so
    that the final label has the requested width.
    """

    __slots__ = ('_render_fn', '_fallback_fn')

    def __init__(self, render_fn, fallback=None):
        if fallback is None:
            fallback = _default_fallback
        object.__setattr__(self, '_render_fn', render_fn)
        object.__setattr__(self, '_fallback_fn', fallback)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    def __call__(self, index):
        result = self._render_fn(index, 0)
        if result is None:
            return self._fallback_fn(index)
        return result

    def render(self, index, decorator_length=0):
        r"""
        Render `index` without resorting to the fallback.  Returns `None` if
        this style cannot represent `index`.
        """
        return self._render_fn(index, decorator_length)

    def range(self, min_value, max_value, fallback=None):
        r"""
        Return a style that only renders indices between `min_value` and
        `max_value` (inclusive).  Either bound may be `None` to leave that
        side unbounded.  Other indices are handed to the fallback, which is
        `fallback` if given, or this style's fallback otherwise.
        """
        if min_value is not None and max_value is not None and min_value > max_value:
            raise ValueError(
                f"Invalid range: ‘{repr(min_value)}’ is greater than ‘{repr(max_value)}’"
            )
        render_fn = self._render_fn

        def _render_range(index, decorator_length):
            if min_value is not None and index < min_value:
                return None
            if max_value is not None and index > max_value:
                return None
            return render_fn(index, decorator_length)

        return CounterStyle(
            _render_range,
            fallback if fallback is not None else self._fallback_fn
        )

    def fallback(self, fallback):
        r"""
        Return a style with the same renderer, but with `fallback` used for
        indices that cannot be rendered.
        """
        return CounterStyle(self._render_fn, fallback)

    def negative(self, prefix, suffix=''):
        r"""
        Return a style that renders a negative index as `prefix`, followed by
        the rendering of its absolute value, followed by `suffix`.
        Non-negative indices are rendered as before.
        """
        render_fn = self._render_fn
        affix_length = len(prefix) + len(suffix)

        def _render_negative(index, decorator_length):
            if index < 0:
                result = render_fn(-index, decorator_length + affix_length)
                if result is None:
                    return None
                return prefix + result + suffix
            return render_fn(index, decorator_length)

        return CounterStyle(_render_negative, self._fallback_fn)

    def pad_left(self, length, pad):
        r"""
        Return a style whose labels are padded on the left with `pad` up to
        `length` characters.  Longer labels are left untouched.
        """
        return self._padded(length, pad, True)

    def pad_right(self, length, pad):
        r"""
        Same as :py:meth:`pad_left`, but pad on the right.
        """
        return self._padded(length, pad, False)

    def _padded(self, length, pad, left):
        if not pad:
            raise ValueError(f"Invalid pad string ‘{repr(pad)}’, expected a non-empty string")
        if length < 0:
            raise ValueError(f"Invalid pad length ‘{repr(length)}’")
        render_fn = self._render_fn

        def _render_padded(index, decorator_length):
            return _pad(render_fn(index, 0), length - decorator_length, pad, left)

        return CounterStyle(_render_padded, self._fallback_fn)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._render_fn.__qualname__}>"


def cyclic(*symbols):
    r"""
    Cycle through `symbols` indefinitely: ``symbols[0]`` for index 1,
    ``symbols[1]`` for index 2, etc.  Valid for all integers.
    """
    symbols = _check_symbols('cyclic', symbols)
    N = len(symbols)
    if N == 1:
        symbol = symbols[0]
        return CounterStyle(lambda index, decorator_length: symbol)
    return CounterStyle(
        lambda index, decorator_length: symbols[(index - 1) % N]
    )


def fixed(*symbols):
    r"""
    Use each of `symbols` once, for indices ``1`` to ``len(symbols)``.  Other
    indices use the fallback.
    """
    symbols = _check_symbols('fixed', symbols)
    return CounterStyle(
        lambda index, decorator_length: symbols[index - 1]
    ).range(1, len(symbols))


def symbolic(*symbols):
    r"""
    Go through `symbols`, then through each symbol doubled, then tripled,
    and so on.  For instance ``symbolic('*', '†')`` gives ``'*', '†', '**',
    '††', '***', ...``.  Valid for positive indices.
    """
    symbols = _check_symbols('symbolic', symbols)
    N = len(symbols)

    def _render_symbolic(index, decorator_length):
        # *, †, ..., **, ††, ..., ***, †††, ... ...
        n = index - 1 # start counting at 1
        return symbols[n % N] * (1 + (n // N))

    return CounterStyle(_render_symbolic).range(1, None)


def alphabetic(*symbols):
    r"""
    Bijective base-N numbering with the given `symbols` as digits: ``a, b,
    ..., z, aa, ab, ...``.  There is no zero digit, so the style is valid for
    positive indices only.
    """
    symbols = _check_symbols('alphabetic', symbols, min_count=2)
    N = len(symbols)

    def _render_alphabetic(index, decorator_length):
        s = ''
        while index > 0:
            index -= 1
            s = symbols[index % N] + s
            index = index // N
        return s

    return CounterStyle(_render_alphabetic).range(1, None)


def numeric(*symbols):
    r"""
    Positional base-N numbering, where ``symbols[0]`` is the zero digit.

    For example, to get a binary representation of `n` using 'F' and 'T'
    instead of '0' and '1', you can use ``numeric('F', 'T')``.  Valid for
    non-negative indices; combine with :py:meth:`CounterStyle.negative` to
    handle negative ones.
    """
    symbols = _check_symbols('numeric', symbols, min_count=2)
    base = len(symbols)

    def _render_numeric(index, decorator_length):
        if index == 0:
            return symbols[0]
        s = ''
        while index:
            q, r = index // base, index % base
            s = symbols[r] + s
            index = q
        return s

    return CounterStyle(_render_numeric).range(0, None)


def additive(weighted_symbols):
    r"""
    Additive numbering system, like roman numerals.

    The argument `weighted_symbols` is a mapping (or a sequence of pairs)
    ``{weight: symbol}``.  An index is written by repeatedly taking the
    largest weight that fits, e.g., ``additive({10: 'X', 5: 'V', 4: 'IV', 1:
    'I'})(14) == 'XIV'``.  If the weights cannot add up exactly to the index,
    the fallback is used.

    A symbol for weight ``0`` is used to render the index zero.  Without it,
    the style is only valid for positive indices.
    """
    if hasattr(weighted_symbols, 'items'):
        weighted_symbols = weighted_symbols.items()

    zero_symbol = None
    symbol_list = []
    for weight, symbol in weighted_symbols:
        weight = _expect_int(weight, "additive weight")
        if not isinstance(symbol, str):
            raise ValueError(
                f"additive(): invalid symbol ‘{repr(symbol)}’ for weight {weight}"
            )
        if weight < 0:
            raise ValueError(f"additive(): invalid negative weight ‘{weight}’")
        if weight == 0:
            zero_symbol = symbol
            continue
        symbol_list.append( (weight, symbol) )

    if len(symbol_list) == 0:
        raise ValueError("additive() requires at least one symbol with a positive weight")

    symbol_list.sort(key=lambda ws: ws[0], reverse=True)
    symbol_list = tuple(symbol_list)

    def _render_additive(index, decorator_length):
        if index == 0:
            return zero_symbol
        s = ''
        for weight, symbol in symbol_list:
            if index >= weight:
                repeat = index // weight
                s += symbol * repeat
                index -= repeat * weight
        if index != 0:
            return None
        return s

    style = CounterStyle(_render_additive)
    if zero_symbol is not None:
        return style.range(0, None)
    return style.range(1, None)
