"""Reference strings shared by the codec tests.

Non-ASCII characters are spelled with ``chr`` so every expected escape is
readable in the source.
"""


def _text(*code_points):
    return "".join(chr(cp) for cp in code_points)


# D-stroke, i/u-tilde, o/u-horn and the first dot-below pair of Vietnamese.
VIETNAMESE = _text(0x110, 0x111, 0x129, 0x128, 0x169, 0x168, 0x1A1, 0x1A0, 0x1B0, 0x1AF, 0x1EA1, 0x1EA0)

# Flag of Wales (black flag + tag sequence), two people holding hands, black flag.
WALES_FLAG = _text(0x1F3F4, 0xE0067, 0xE0062, 0xE0077, 0xE006C, 0xE0073, 0xE007F)
HOLDING_HANDS = _text(0x1F9D1, 0x200D, 0x1F91D, 0x200D, 0x1F9D1)
EMOJI = WALES_FLAG + " " + HOLDING_HANDS + " " + chr(0x1F3F4)

MIX_LOWERCASE = (
    "foo " + chr(0xA9) + " bar " + chr(0xDF) + " baz & qux <> " + chr(0x1F34E) + " "
    + WALES_FLAG + " " + _text(0xE9, 0xE1, 0x151, 0xFA) + " " + _text(0x1D6F2, 0x1F772)
)
MIX_UPPERCASE = (
    "FOO " + chr(0xA9) + " BAR SS BAZ & QUX <> " + chr(0x1F34E) + " "
    + WALES_FLAG + " " + _text(0xC9, 0xC1, 0x150, 0xDA) + " " + _text(0x1D6F2, 0x1F772)
)

# Slovak and Hungarian accented letters.
ACCENTED = _text(
    0xF4, 0x148, 0xFA, 0xE4, 0xE9, 0xED, 0xE1, 0xFD, 0x17E, 0x165, 0x10D, 0x161, 0x13E,
    0xD4, 0x147, 0xDA, 0xC4, 0xC9, 0xCD, 0xC1, 0xDD, 0x17D, 0x164, 0x10C, 0x160, 0x13D,
    0xE9, 0xE1, 0x171, 0x151, 0xFA, 0xF3, 0xFC, 0xF6, 0xED,
    0xC9, 0xC1, 0x170, 0x150, 0xDA, 0xD3, 0xDC, 0xD6, 0xCD,
)

E_ACUTE = chr(0xE9)
GRINNING_FACE = chr(0x1F600)
