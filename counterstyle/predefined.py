r"""
Predefined counter styles.

Based on https://drafts.csswg.org/css-counter-styles-3/#predefined-counters,
plus a few styles that are commonly used in documents (footnote symbols,
unicode superscript/subscript digits).

Styles are available as module attributes (e.g. ``lower_roman``) and by their
CSS name in :py:data:`standard_counter_styles` (e.g. ``'lower-roman'``).
"""

import string

from .counterstyle import (
    CounterStyle, cyclic, fixed, symbolic, alphabetic, numeric, additive,
)
from .template import sty


def _decimal_digits(zero):
    return [ chr(zero + j) for j in range(10) ]


def _additive_digit_rows(*rows):
    # rows[k][d-1] is the symbol for d * 10**k
    return {
        d * 10**k: symbol
        for k, row in enumerate(rows)
        for d, symbol in enumerate(row, 1)
    }


def _cjk_additive_table(digits, markers, zero, one_prefix):
    # digits are the symbols for 1-9, markers the symbols for 10, 100, 1000
    table = {0: zero}
    for d, digit in enumerate(digits, 1):
        table[d] = digit
        lead = digit if (d > 1 or one_prefix) else ''
        for k, marker in enumerate(markers, 1):
            table[d * 10**k] = lead + marker
    return table


def _cjk_item(style):
    return sty(style, '、')


# ------------------------------------------------------------------------------
# Decimal-like styles
# ------------------------------------------------------------------------------

# faster than numeric(*'0123456789')
decimal = CounterStyle(lambda index, decorator_length: str(index))

decimal_leading_zero = decimal.pad_left(2, '0').negative('-')

arabic_indic = numeric(*_decimal_digits(0x0660))  # ٠ ١ ٢ ... ٩
bengali = numeric(*_decimal_digits(0x09E6))       # ০ ১ ২ ... ৯
cambodian = numeric(*_decimal_digits(0x17E0))     # ០ ១ ២ ... ៩
khmer = cambodian
cjk_decimal = numeric(*'〇一二三四五六七八九')
cjk_decimal_item = _cjk_item(cjk_decimal)
devanagari = numeric(*_decimal_digits(0x0966))    # ० १ २ ... ९
gujarati = numeric(*_decimal_digits(0x0AE6))      # ૦ ૧ ૨ ... ૯
gurmukhi = numeric(*_decimal_digits(0x0A66))      # ੦ ੧ ੨ ... ੯
kannada = numeric(*_decimal_digits(0x0CE6))       # ೦ ೧ ೨ ... ೯
lao = numeric(*_decimal_digits(0x0ED0))           # ໐ ໑ ໒ ... ໙
malayalam = numeric(*_decimal_digits(0x0D66))     # ൦ ൧ ൨ ... ൯
mongolian = numeric(*_decimal_digits(0x1810))     # ᠐ ᠑ ᠒ ... ᠙
myanmar = numeric(*_decimal_digits(0x1040))       # ၀ ၁ ၂ ... ၉
oriya = numeric(*_decimal_digits(0x0B66))         # ୦ ୧ ୨ ... ୯
persian = numeric(*_decimal_digits(0x06F0))       # ۰ ۱ ۲ ... ۹
tamil = numeric(*_decimal_digits(0x0BE6))         # ௦ ௧ ௨ ... ௯
telugu = numeric(*_decimal_digits(0x0C66))        # ౦ ౧ ౨ ... ౯
thai = numeric(*_decimal_digits(0x0E50))          # ๐ ๑ ๒ ... ๙
tibetan = numeric(*_decimal_digits(0x0F20))       # ༠ ༡ ༢ ... ༩


# _unicodesuperscriptdigits[4] == '⁴'
# _unicodesubscriptdigits[4] == '₄'
#
# cf. https://en.wikipedia.org/wiki/Unicode_subscripts_and_superscripts
_unicodesuperscriptdigits = [
    chr(0x2070), chr(0x00B9), chr(0x00B2), chr(0x00B3), chr(0x2074),
    chr(0x2075), chr(0x2076), chr(0x2077), chr(0x2078), chr(0x2079),
]
_unicodesubscriptdigits = _decimal_digits(0x2080)

unicode_superscript = numeric(*_unicodesuperscriptdigits).negative('⁻')
unicode_subscript = numeric(*_unicodesubscriptdigits).negative('₋')


# ------------------------------------------------------------------------------
# Additive styles
# ------------------------------------------------------------------------------

# Ա Բ Գ ... Ք, consecutive code points for 1-9, 10-90, 100-900, 1000-9000
upper_armenian = additive(_additive_digit_rows(
    *[ [ chr(0x0531 + 9*k + j) for j in range(9) ] for k in range(4) ]
)).range(1, 9999)
armenian = upper_armenian

# ա բ գ ... ք
lower_armenian = additive(_additive_digit_rows(
    *[ [ chr(0x0561 + 9*k + j) for j in range(9) ] for k in range(4) ]
)).range(1, 9999)

georgian = additive({
    **_additive_digit_rows(
        "აბგდევზჱთ",
        "იკლმნჲოპჟ",
        "რსტჳფქღყშ",
        "ჩცძწჭხჴჯჰ",
    ),
    10000: "ჵ",
}).range(1, 19999)

# Values 15 and 16 are written as 9+6 and 9+7 instead of 10+5 and 10+6.
hebrew = additive({
    **_additive_digit_rows(
        # 1-9
        "אבגדהוזחט",
        # 10-90
        "יכלמנסעפצ",
        # 100-900
        "קרשתךםןףץ",
        # 1000-9000: units followed by a geresh
        [ chr(0x05D0 + j) + "׳" for j in range(9) ],
    ),
    10000: "י׳",
    19: "יט",
    18: "יח",
    17: "יז",
    16: "טז",
    15: "טו",
}).range(1, 10999)

_romancounterchars = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

upper_roman = additive(_romancounterchars).range(1, 3999)
lower_roman = additive(
    [ (value, char.lower()) for (value, char) in _romancounterchars ]
).range(1, 3999)

_japanese_minus = 'マイナス'

japanese_informal = additive(_cjk_additive_table(
    '一二三四五六七八九', '十百千', zero='〇', one_prefix=False
)).negative(_japanese_minus).range(-9999, 9999).fallback(
    cjk_decimal.negative(_japanese_minus)
)
japanese_informal_item = _cjk_item(japanese_informal)

japanese_formal = additive(_cjk_additive_table(
    '壱弐参四伍六七八九', '拾百阡', zero='零', one_prefix=True
)).negative(_japanese_minus).range(-9999, 9999).fallback(
    cjk_decimal.negative(_japanese_minus)
)
japanese_formal_item = _cjk_item(japanese_formal)

_korean_minus = '마이너스 '

korean_hangul_formal = additive(_cjk_additive_table(
    '일이삼사오육칠팔구', '십백천', zero='영', one_prefix=True
)).negative(_korean_minus).range(-9999, 9999)
korean_hangul_formal_item = sty(korean_hangul_formal, ',')

korean_hanja_informal = additive(_cjk_additive_table(
    '一二三四五六七八九', '十百千', zero='零', one_prefix=False
)).negative(_korean_minus).range(-9999, 9999)
korean_hanja_informal_item = sty(korean_hanja_informal, ',')

korean_hanja_formal = additive(_cjk_additive_table(
    '壹貳參四五六七八九', '拾百仟', zero='零', one_prefix=True
)).negative(_korean_minus).range(-9999, 9999)
korean_hanja_formal_item = sty(korean_hanja_formal, ',')


# ------------------------------------------------------------------------------
# Alphabetic styles
# ------------------------------------------------------------------------------

lower_alpha = alphabetic(*string.ascii_lowercase)
lower_latin = lower_alpha

upper_alpha = alphabetic(*string.ascii_uppercase)
upper_latin = upper_alpha

lower_greek = alphabetic(*'αβγδεζηθικλμνξοπρστυφχψω')

hiragana = alphabetic(
    *'あいうえおかきくけこさしすせそたちつてとなにぬねのはひふへほまみむめもやゆよらりるれろわゐゑをん'
)
hiragana_item = _cjk_item(hiragana)

hiragana_iroha = alphabetic(
    *'いろはにほへとちりぬるをわかよたれそつねならむうゐのおくやまけふこえてあさきゆめみしゑひもせす'
)
hiragana_iroha_item = _cjk_item(hiragana_iroha)

katakana = alphabetic(
    *'アイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワヰヱヲン'
)
katakana_item = _cjk_item(katakana)

katakana_iroha = alphabetic(
    *'イロハニホヘトチリヌルヲワカヨタレソツネナラムウヰノオクヤマケフコエテアサキユメミシヱヒモセス'
)
katakana_iroha_item = _cjk_item(katakana_iroha)


# ------------------------------------------------------------------------------
# Symbolic, cyclic and fixed styles
# ------------------------------------------------------------------------------

_fnsymbols = [
    '*',
    '†',
    '‡',
    '§',
    '¶',
    '‖',
]

# *, †, ..., ‖, **, ††, ..., ‖‖, ***, ...
fnsymbol = symbolic(*_fnsymbols)

disc = cyclic('•')
circle = cyclic('◦')
square = cyclic('◾')

cjk_earthly_branch = fixed(*'子丑寅卯辰巳午未申酉戌亥')
cjk_earthly_branch_item = _cjk_item(cjk_earthly_branch)

cjk_heavenly_stem = fixed(*'甲乙丙丁戊己庚辛壬癸')
cjk_heavenly_stem_item = _cjk_item(cjk_heavenly_stem)

# TODO: Chinese numbering systems (simp-/trad-chinese-informal/formal) need
# their own algorithm, cf.
# https://drafts.csswg.org/css-counter-styles-3/#limited-chinese


standard_counter_styles = {
    'decimal': decimal,
    'decimal-leading-zero': decimal_leading_zero,
    'arabic-indic': arabic_indic,
    'armenian': armenian,
    'upper-armenian': upper_armenian,
    'lower-armenian': lower_armenian,
    'bengali': bengali,
    'cambodian': cambodian,
    'khmer': khmer,
    'cjk-decimal': cjk_decimal,
    'cjk-decimal-item': cjk_decimal_item,
    'devanagari': devanagari,
    'georgian': georgian,
    'gujarati': gujarati,
    'gurmukhi': gurmukhi,
    'hebrew': hebrew,
    'kannada': kannada,
    'lao': lao,
    'malayalam': malayalam,
    'mongolian': mongolian,
    'myanmar': myanmar,
    'oriya': oriya,
    'persian': persian,
    'lower-roman': lower_roman,
    'upper-roman': upper_roman,
    'tamil': tamil,
    'telugu': telugu,
    'thai': thai,
    'tibetan': tibetan,
    'lower-alpha': lower_alpha,
    'lower-latin': lower_latin,
    'upper-alpha': upper_alpha,
    'upper-latin': upper_latin,
    'lower-greek': lower_greek,
    'hiragana': hiragana,
    'hiragana-item': hiragana_item,
    'hiragana-iroha': hiragana_iroha,
    'hiragana-iroha-item': hiragana_iroha_item,
    'katakana': katakana,
    'katakana-item': katakana_item,
    'katakana-iroha': katakana_iroha,
    'katakana-iroha-item': katakana_iroha_item,
    'disc': disc,
    'circle': circle,
    'square': square,
    'cjk-earthly-branch': cjk_earthly_branch,
    'cjk-earthly-branch-item': cjk_earthly_branch_item,
    'cjk-heavenly-stem': cjk_heavenly_stem,
    'cjk-heavenly-stem-item': cjk_heavenly_stem_item,
    'japanese-informal': japanese_informal,
    'japanese-informal-item': japanese_informal_item,
    'japanese-formal': japanese_formal,
    'japanese-formal-item': japanese_formal_item,
    'korean-hangul-formal': korean_hangul_formal,
    'korean-hangul-formal-item': korean_hangul_formal_item,
    'korean-hanja-informal': korean_hanja_informal,
    'korean-hanja-informal-item': korean_hanja_informal_item,
    'korean-hanja-formal': korean_hanja_formal,
    'korean-hanja-formal-item': korean_hanja_formal_item,
    'fnsymbol': fnsymbol,
    'unicode-superscript': unicode_superscript,
    'unicode-subscript': unicode_subscript,
}
r"""
Dictionary providing the predefined counter styles by their CSS name.

The values are :py:class:`~counterstyle.counterstyle.CounterStyle` instances,
except for the ``*-item`` entries which are plain formatters built with
:py:func:`~counterstyle.template.sty`.
"""

abbreviations = {
    '1': 'decimal',
    'a': 'lower-alpha',
    'A': 'upper-alpha',
    'i': 'lower-roman',
    'I': 'upper-roman',
}
r"""
Single-character shorthands for common styles, as used in LaTeX
``enumerate`` tag templates (e.g. ``'(a)'``).
"""
