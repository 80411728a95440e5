import unittest

from counterstyle import predefined
from counterstyle.counterstyle import CounterStyle


def _chrs(*codepoints):
    return "".join([ chr(c) for c in codepoints ])


class TestDecimalStyles(unittest.TestCase):

    def test_decimal(self):
        self.assertEqual(predefined.decimal(0), '0')
        self.assertEqual(predefined.decimal(124), '124')
        self.assertEqual(predefined.decimal(-12), '-12')

    def test_decimal_leading_zero(self):
        decimal_leading_zero = predefined.decimal_leading_zero
        self.assertEqual(decimal_leading_zero(1), '01')
        self.assertEqual(decimal_leading_zero(10), '10')
        self.assertEqual(decimal_leading_zero(123), '123')
        # the negative sign counts towards the padded width
        self.assertEqual(decimal_leading_zero(-1), '-1')
        self.assertEqual(decimal_leading_zero(-10), '-10')

    def test_arabic_indic(self):
        self.assertEqual(predefined.arabic_indic(0), chr(0x0660))
        self.assertEqual(predefined.arabic_indic(123), _chrs(0x0661, 0x0662, 0x0663))
        self.assertEqual(predefined.arabic_indic(-4), '-4')

    def test_devanagari(self):
        self.assertEqual(predefined.devanagari(1907), _chrs(0x0967, 0x096F, 0x0966, 0x096D))

    def test_cjk_decimal(self):
        self.assertEqual(predefined.cjk_decimal(2024), '二〇二四')
        self.assertEqual(predefined.cjk_decimal_item(7), '七、')

    def test_khmer_alias(self):
        self.assertIs(predefined.khmer, predefined.cambodian)

    def test_unicode_superscript(self):
        self.assertEqual(predefined.unicode_superscript(17), '¹⁷')
        self.assertEqual(predefined.unicode_superscript(0), '⁰')
        self.assertEqual(predefined.unicode_superscript(-3), '⁻³')

    def test_unicode_subscript(self):
        self.assertEqual(predefined.unicode_subscript(17), '₁₇')
        self.assertEqual(predefined.unicode_subscript(-20), '₋₂₀')


class TestAdditiveStyles(unittest.TestCase):

    def test_roman(self):
        roman = predefined.lower_roman
        self.assertEqual(roman(1), 'i')
        self.assertEqual(roman(2), 'ii')
        self.assertEqual(roman(4), 'iv')
        self.assertEqual(roman(5), 'v')
        self.assertEqual(roman(9), 'ix')
        self.assertEqual(roman(49), 'xlix')
        self.assertEqual(roman(2099), 'mmxcix')

    def test_Roman(self):
        Roman = predefined.upper_roman
        self.assertEqual(Roman(1), 'I')
        self.assertEqual(Roman(4), 'IV')
        self.assertEqual(Roman(49), 'XLIX')
        self.assertEqual(Roman(2099), 'MMXCIX')
        self.assertEqual(Roman(3999), 'MMMCMXCIX')

    def test_roman_out_of_range(self):
        self.assertEqual(predefined.upper_roman(4000), '4000')
        self.assertEqual(predefined.upper_roman(0), '0')
        self.assertEqual(predefined.upper_roman(-3), '-3')

    def test_armenian(self):
        self.assertIs(predefined.armenian, predefined.upper_armenian)
        self.assertEqual(predefined.armenian(1), chr(0x0531))
        self.assertEqual(predefined.armenian(10), chr(0x053A))
        self.assertEqual(predefined.armenian(9999), _chrs(0x0554, 0x054B, 0x0542, 0x0539))
        self.assertEqual(predefined.armenian(10000), '10000')
        self.assertEqual(predefined.lower_armenian(2), chr(0x0562))
        self.assertEqual(predefined.lower_armenian(1001), _chrs(0x057C, 0x0561))

    def test_georgian(self):
        georgian = predefined.georgian
        self.assertEqual(georgian(1), chr(0x10D0))
        self.assertEqual(georgian(8), chr(0x10F1))
        self.assertEqual(georgian(10000), chr(0x10F5))
        self.assertEqual(georgian(19999),
                         _chrs(0x10F5, 0x10F0, 0x10E8, 0x10DF, 0x10D7))
        self.assertEqual(georgian(20000), '20000')

    def test_hebrew(self):
        hebrew = predefined.hebrew
        self.assertEqual(hebrew(1), chr(0x05D0))
        self.assertEqual(hebrew(11), _chrs(0x05D9, 0x05D0))
        self.assertEqual(hebrew(15), _chrs(0x05D8, 0x05D5))
        self.assertEqual(hebrew(16), _chrs(0x05D8, 0x05D6))
        self.assertEqual(hebrew(17), _chrs(0x05D9, 0x05D6))
        self.assertEqual(hebrew(115), _chrs(0x05E7, 0x05D8, 0x05D5))
        self.assertEqual(hebrew(1000), _chrs(0x05D0, 0x05F3))
        self.assertEqual(hebrew(10999), _chrs(0x05D9, 0x05F3, 0x05E5, 0x05E6, 0x05D8))
        self.assertEqual(hebrew(11000), '11000')

    def test_japanese_informal(self):
        japanese = predefined.japanese_informal
        self.assertEqual(japanese(0), '〇')
        self.assertEqual(japanese(1), '一')
        self.assertEqual(japanese(10), '十')
        self.assertEqual(japanese(11), '十一')
        self.assertEqual(japanese(21), '二十一')
        self.assertEqual(japanese(1000), '千')
        self.assertEqual(japanese(2024), '二千二十四')
        self.assertEqual(japanese(-5), 'マイナス五')

    def test_japanese_informal_fallback(self):
        japanese = predefined.japanese_informal
        self.assertEqual(japanese(10000), '一〇〇〇〇')
        self.assertEqual(japanese(-10000), 'マイナス一〇〇〇〇')
        self.assertEqual(predefined.japanese_informal_item(3), '三、')

    def test_japanese_formal(self):
        japanese = predefined.japanese_formal
        self.assertEqual(japanese(0), '零')
        self.assertEqual(japanese(1), '壱')
        self.assertEqual(japanese(10), '壱拾')
        self.assertEqual(japanese(1234), '壱阡弐百参拾四')

    def test_korean(self):
        self.assertEqual(predefined.korean_hangul_formal(10), '일십')
        self.assertEqual(predefined.korean_hangul_formal(111), '일백일십일')
        self.assertEqual(predefined.korean_hangul_formal(0), '영')
        self.assertEqual(predefined.korean_hangul_formal(-1), '마이너스 일')
        self.assertEqual(predefined.korean_hanja_informal(10), '十')
        self.assertEqual(predefined.korean_hanja_informal(0), '零')
        self.assertEqual(predefined.korean_hanja_formal(2), '貳')
        self.assertEqual(predefined.korean_hanja_formal_item(2), '貳,')
        self.assertEqual(predefined.korean_hanja_informal(10000), '10000')


class TestAlphabeticStyles(unittest.TestCase):

    def test_alpha(self):
        alpha = predefined.lower_alpha
        self.assertEqual(alpha(1), 'a')
        self.assertEqual(alpha(16), 'p')
        self.assertEqual(alpha(26), 'z')
        self.assertEqual(alpha(27), 'aa')
        self.assertEqual(alpha(28), 'ab')
        self.assertEqual(alpha(702), 'zz')
        self.assertEqual(alpha(703), 'aaa')
        self.assertEqual(alpha(0), '0')

    def test_Alpha(self):
        Alpha = predefined.upper_alpha
        self.assertEqual(Alpha(1), 'A')
        self.assertEqual(Alpha(26), 'Z')
        self.assertEqual(Alpha(28), 'AB')
        self.assertIs(predefined.upper_latin, Alpha)

    def test_greek(self):
        self.assertEqual(predefined.lower_greek(1), 'α')
        self.assertEqual(predefined.lower_greek(24), 'ω')
        self.assertEqual(predefined.lower_greek(25), 'αα')

    def test_kana(self):
        self.assertEqual(predefined.hiragana(1), 'あ')
        self.assertEqual(predefined.hiragana(48), 'ん')
        self.assertEqual(predefined.hiragana(49), 'ああ')
        self.assertEqual(predefined.hiragana_iroha(3), 'は')
        self.assertEqual(predefined.katakana(2), 'イ')
        self.assertEqual(predefined.katakana_iroha(47), 'ス')
        self.assertEqual(predefined.katakana_item(1), 'ア、')


class TestSymbolicStyles(unittest.TestCase):

    def test_fnsymbol(self):
        fnsymbol = predefined.fnsymbol
        self.assertEqual(fnsymbol(1), '*')
        self.assertEqual(fnsymbol(2), '†')
        self.assertEqual(fnsymbol(6), '‖')
        self.assertEqual(fnsymbol(7), '**')
        self.assertEqual(fnsymbol(8), '††')
        self.assertEqual(fnsymbol(13), '***')

    def test_bullets(self):
        for index in (-1, 0, 1, 5):
            self.assertEqual(predefined.disc(index), '•')
            self.assertEqual(predefined.circle(index), '◦')
            self.assertEqual(predefined.square(index), '◾')

    def test_cjk_fixed(self):
        self.assertEqual(predefined.cjk_earthly_branch(1), '子')
        self.assertEqual(predefined.cjk_earthly_branch(12), '亥')
        self.assertEqual(predefined.cjk_earthly_branch(13), '13')
        self.assertEqual(predefined.cjk_heavenly_stem(10), '癸')
        self.assertEqual(predefined.cjk_heavenly_stem_item(1), '甲、')


class TestStandardCounterStyles(unittest.TestCase):

    def test_names(self):
        styles = predefined.standard_counter_styles
        self.assertIs(styles['lower-roman'], predefined.lower_roman)
        self.assertIs(styles['decimal-leading-zero'], predefined.decimal_leading_zero)
        self.assertIs(styles['japanese-formal-item'], predefined.japanese_formal_item)

    def test_abbreviations(self):
        for abbrev, name in predefined.abbreviations.items():
            self.assertIn(name, predefined.standard_counter_styles)
        self.assertEqual(predefined.abbreviations['i'], 'lower-roman')

    def test_all_render(self):
        for name, style in predefined.standard_counter_styles.items():
            for index in range(-5, 60):
                label = style(index)
                self.assertIsInstance(label, str, msg=name)
                self.assertTrue(len(label) > 0, msg=name)

    def test_styles_are_counter_styles(self):
        for name, style in predefined.standard_counter_styles.items():
            if name.endswith('-item'):
                continue
            self.assertIsInstance(style, CounterStyle, msg=name)


if __name__ == '__main__':
    unittest.main()
