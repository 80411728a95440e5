r"""
Build counter styles from declarative definitions, e.g. loaded from a YAML
configuration file.

A definition is a mapping whose keys mirror the descriptors of a CSS
``@counter-style`` rule::

    styles:
      checkbox:
        system: cyclic
        symbols: ['☐', '☑']
      outline:
        extends: upper-roman
        pad: [4, ' ']
        fallback: lower-alpha
      section:
        template: '${upper-roman}.${decimal}'

The base style is given by exactly one of ``system`` (with ``symbols`` or
``additive-symbols``), ``extends`` (the name of another style) or
``template``.  The remaining descriptors are applied to the base style in
the order ``pad``/``pad-right``, ``negative``, ``range``, ``fallback``.
"""

from .counterstyle import (
    CounterStyle, cyclic, fixed, symbolic, alphabetic, numeric, additive,
)
from .template import parse_template
from . import predefined

import logging
logger = logging.getLogger(__name__)


_systems = {
    'cyclic': cyclic,
    'fixed': fixed,
    'symbolic': symbolic,
    'alphabetic': alphabetic,
    'numeric': numeric,
}

_base_keys = ('system', 'extends', 'template')

_known_keys = (
    'system', 'extends', 'template', 'symbols', 'additive-symbols',
    'pad', 'pad-right', 'negative', 'range', 'fallback',
)


def _symbol_str(symbol, name):
    if isinstance(symbol, str):
        return symbol
    if isinstance(symbol, (int, float)) and not isinstance(symbol, bool):
        # e.g. YAML `symbols: [0, 1]`
        return str(symbol)
    raise ValueError(f"Counter style ‘{name}’: invalid symbol ‘{repr(symbol)}’")


def _get_symbols(definition, name):
    symbols = definition.get('symbols', None)
    if symbols is None:
        raise ValueError(f"Counter style ‘{name}’: missing ‘symbols’")
    if isinstance(symbols, str) or not isinstance(symbols, (list, tuple)):
        raise ValueError(
            f"Counter style ‘{name}’: ‘symbols’ must be a list, got ‘{repr(symbols)}’"
        )
    return [ _symbol_str(s, name) for s in symbols ]


def _get_additive_symbols(definition, name):
    weighted_symbols = definition.get('additive-symbols', None)
    if weighted_symbols is None:
        raise ValueError(f"Counter style ‘{name}’: missing ‘additive-symbols’")
    if isinstance(weighted_symbols, dict):
        weighted_symbols = list(weighted_symbols.items())
    pairs = []
    for pair in weighted_symbols:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError(
                f"Counter style ‘{name}’: invalid additive symbol ‘{repr(pair)}’, "
                f"expected [weight, symbol]"
            )
        weight, symbol = pair
        pairs.append( (weight, _symbol_str(symbol, name)) )
    return pairs


def _get_pad(value, key, name):
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(
            f"Counter style ‘{name}’: ‘{key}’ must be [length, pad], got ‘{repr(value)}’"
        )
    length, pad = value
    if not isinstance(length, int) or isinstance(length, bool):
        raise ValueError(f"Counter style ‘{name}’: invalid ‘{key}’ length ‘{repr(length)}’")
    return length, _symbol_str(pad, name)


def _get_negative(value, name):
    if isinstance(value, str):
        return value, ''
    if isinstance(value, (list, tuple)) and len(value) in (1, 2) \
       and all(isinstance(v, str) for v in value):
        if len(value) == 1:
            return value[0], ''
        return value[0], value[1]
    raise ValueError(
        f"Counter style ‘{name}’: ‘negative’ must be a prefix string or "
        f"[prefix, suffix], got ‘{repr(value)}’"
    )


def _get_range_bound(bound, name):
    if bound is None or bound in ('infinite', 'infinity'):
        return None
    if isinstance(bound, int) and not isinstance(bound, bool):
        return bound
    raise ValueError(f"Counter style ‘{name}’: invalid range bound ‘{repr(bound)}’")


def _get_range(value, name):
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(
            f"Counter style ‘{name}’: ‘range’ must be [min, max], got ‘{repr(value)}’"
        )
    return _get_range_bound(value[0], name), _get_range_bound(value[1], name)


def build_counter_style(definition, named_styles, *, name=None):
    r"""
    Build a counter style from the mapping `definition`.

    The argument `named_styles` is used to look up the styles that the
    definition refers to by name (via ``extends``, ``fallback`` or in a
    ``template``).  It can be any object supporting ``named_styles[name]``
    and raising `KeyError` for unknown names, such as a
    :py:class:`CounterStyleRegistry`.

    The `name` is only used in error messages.
    """
    if name is None:
        name = '<anonymous>'

    if not isinstance(definition, dict):
        raise ValueError(
            f"Counter style ‘{name}’: expected a mapping, got ‘{repr(definition)}’"
        )

    unknown_keys = [ k for k in definition if k not in _known_keys ]
    if unknown_keys:
        raise ValueError(
            f"Counter style ‘{name}’: unknown key(s) {', '.join(map(repr, unknown_keys))}"
        )

    base_keys = [ k for k in _base_keys if k in definition ]
    if len(base_keys) != 1:
        raise ValueError(
            f"Counter style ‘{name}’: expected exactly one of "
            f"‘system’, ‘extends’ or ‘template’"
        )
    base_key = base_keys[0]

    def _lookup(refname, key):
        try:
            return named_styles[refname]
        except KeyError:
            raise ValueError(
                f"Counter style ‘{name}’: unknown style ‘{refname}’ in ‘{key}’"
            )

    if base_key == 'template':
        decorators = [ k for k in definition if k != 'template' ]
        if decorators:
            raise ValueError(
                f"Counter style ‘{name}’: ‘template’ cannot be combined with "
                f"{', '.join(map(repr, decorators))}"
            )
        return parse_template(definition['template'], named_styles)

    if base_key == 'extends':
        style = _lookup(definition['extends'], 'extends')
        if not isinstance(style, CounterStyle):
            raise ValueError(
                f"Counter style ‘{name}’: cannot extend ‘{definition['extends']}’, "
                f"which is not a counter style"
            )
    else:
        system = definition['system']
        if system == 'additive':
            constructor = additive
            args = [ _get_additive_symbols(definition, name) ]
        elif system in _systems:
            constructor = _systems[system]
            args = _get_symbols(definition, name)
        else:
            raise ValueError(
                f"Counter style ‘{name}’: unknown system ‘{system}’, expected "
                f"one of {', '.join(list(_systems) + ['additive'])}"
            )
        try:
            style = constructor(*args)
        except ValueError as e:
            raise ValueError(f"Counter style ‘{name}’: {e}") from e

    if 'pad' in definition:
        style = style.pad_left(*_get_pad(definition['pad'], 'pad', name))
    if 'pad-right' in definition:
        style = style.pad_right(*_get_pad(definition['pad-right'], 'pad-right', name))
    if 'negative' in definition:
        style = style.negative(*_get_negative(definition['negative'], name))
    if 'range' in definition:
        min_value, max_value = _get_range(definition['range'], name)
        try:
            style = style.range(min_value, max_value)
        except ValueError as e:
            raise ValueError(f"Counter style ‘{name}’: {e}") from e
    if 'fallback' in definition:
        style = style.fallback(_lookup(definition['fallback'], 'fallback'))

    return style


class CounterStyleRegistry:
    r"""
    A collection of named counter styles (and other formatters).

    By default the registry contains the predefined styles of
    :py:mod:`counterstyle.predefined`.  Styles are looked up by name, or by
    one of the single-character abbreviations ``1 a A i I``.
    """
    def __init__(self, styles=None, abbreviations=None):
        super().__init__()
        if styles is None:
            styles = predefined.standard_counter_styles
        if abbreviations is None:
            abbreviations = predefined.abbreviations
        self._styles = dict(styles)
        self.abbreviations = dict(abbreviations)

    def names(self):
        return list(self._styles.keys())

    def resolve_name(self, name):
        return self.abbreviations.get(name, name)

    def get(self, name):
        r"""
        Return the style called `name`.  Raises `KeyError` if there is no
        such style.
        """
        name = self.resolve_name(name)
        try:
            return self._styles[name]
        except KeyError:
            raise KeyError(
                f"Unknown counter style ‘{name}’; known styles are: "
                + ", ".join(sorted(self._styles))
            )

    def __getitem__(self, name):
        return self.get(name)

    def __contains__(self, name):
        return self.resolve_name(name) in self._styles

    def __iter__(self):
        return iter(self._styles)

    def __len__(self):
        return len(self._styles)

    def register(self, name, style):
        if not callable(style):
            raise ValueError(
                f"Cannot register counter style ‘{name}’: ‘{repr(style)}’ is not callable"
            )
        if name in self._styles:
            logger.debug("Overriding counter style ‘%s’", name)
        self._styles[name] = style

    def load_config(self, config):
        r"""
        Register the styles defined in the ``styles`` mapping of the
        configuration object `config`.  Definitions may refer to each other
        in any order, as well as to the styles already in the registry.
        """
        definitions = config.get('styles', None) if config else None
        if not definitions:
            return []
        if not isinstance(definitions, dict):
            raise ValueError(
                f"Invalid ‘styles’ configuration, expected a mapping, got "
                f"‘{repr(definitions)}’"
            )

        # build everything first so that a bad definition leaves the registry
        # untouched
        loader = _DefinitionsLoader(self, definitions)
        styles = { name: loader[name] for name in definitions }
        for name, style in styles.items():
            self.register(name, style)
            logger.debug("Registered counter style ‘%s’", name)
        return list(styles.keys())


class _DefinitionsLoader:
    r"""
    Builds definitions on demand, so that a definition can refer to another
    one that appears later in the configuration.
    """
    def __init__(self, registry, definitions):
        super().__init__()
        self.registry = registry
        self.definitions = definitions
        self.built = {}
        self.building = []

    def __getitem__(self, name):
        if name in self.built:
            return self.built[name]
        if name not in self.definitions:
            return self.registry.get(name)
        if name in self.building:
            raise ValueError(
                "Circular counter style definitions: "
                + " → ".join(self.building[self.building.index(name):] + [name])
            )
        self.building.append(name)
        try:
            style = build_counter_style(self.definitions[name], self, name=name)
        finally:
            self.building.pop()
        self.built[name] = style
        return style
