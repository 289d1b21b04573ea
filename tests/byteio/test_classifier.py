# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import unittest

from hexthing.byteio import ByteClass, classify, glyph, colorize


class ClassifierTestCase(unittest.TestCase):
    def test_zero(self):
        self.assertIs(classify(0x00), ByteClass.ZERO)
        self.assertEqual(glyph(0x00), '•')

    def test_whitespace(self):
        for b, expected_glyph in [(0x09, '⇥'), (0x0a, '␊'), (0x0d, '␍'), (0x20, '␣')]:
            with self.subTest(b=b):
                self.assertIs(classify(b), ByteClass.WHITESPACE)
                self.assertEqual(glyph(b), expected_glyph)

    def test_printable(self):
        for b in range(0x21, 0x7f):
            self.assertIs(classify(b), ByteClass.PRINTABLE)
            self.assertEqual(glyph(b), chr(b))

    def test_high_bytes(self):
        for b in range(0x80, 0x100):
            self.assertIs(classify(b), ByteClass.HIGH_BYTE)
            self.assertEqual(glyph(b), '×')

    def test_other_control(self):
        for b in [*range(0x01, 0x09), 0x0b, 0x0c, *range(0x0e, 0x20), 0x7f]:
            with self.subTest(b=b):
                self.assertIs(classify(b), ByteClass.OTHER_CONTROL)
                self.assertEqual(glyph(b), '▴')

    def test_total_and_stable(self):
        first = [classify(b) for b in range(0x100)]
        second = [classify(b) for b in range(0x100)]
        self.assertEqual(first, second)
        self.assertTrue(all(isinstance(c, ByteClass) for c in first))
        self.assertEqual({len(glyph(b)) for b in range(0x100)}, {1})

    def test_out_of_range(self):
        for b in [-1, 0x100]:
            with self.assertRaises(ValueError):
                classify(b)
            with self.assertRaises(ValueError):
                glyph(b)

    def test_colorize_keeps_text(self):
        result = colorize(0x41, 'A')
        self.assertIn('A', result)


if __name__ == '__main__':
    unittest.main()
