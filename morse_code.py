#!/usr/bin/env python3
"""
Morse Code Table and Codec
Converts text to Morse code and Morse code back to text
"""

import logging

logger = logging.getLogger(__name__)

# Morse code mapping, space is the word separator '/'
MORSE_CODE = {
    'A': '.-', 'B': '-...', 'C': '-.-.', 'D': '-..', 'E': '.', 'F': '..-.',
    'G': '--.', 'H': '....', 'I': '..', 'J': '.---', 'K': '-.-', 'L': '.-..',
    'M': '--', 'N': '-.', 'O': '---', 'P': '.--.', 'Q': '--.-', 'R': '.-.',
    'S': '...', 'T': '-', 'U': '..-', 'V': '...-', 'W': '.--', 'X': '-..-',
    'Y': '-.--', 'Z': '--..',
    '0': '-----', '1': '.----', '2': '..---', '3': '...--', '4': '....-',
    '5': '.....', '6': '-....', '7': '--...', '8': '---..', '9': '----.',
    ',': '--..--', '.': '.-.-.-', '?': '..--..', "'": '.----.', '!': '-.-.--',
    '/': '-..-.', '(': '-.--.', ')': '-.--.-', '&': '.-...', ':': '---...',
    ';': '-.-.-.', '=': '-...-', '+': '.-.-.', '-': '-....-', '_': '..--.-',
    '"': '.-..-.', '$': '...-..-', '@': '.--.-.', ' ': '/'
}

WORD_SEPARATOR = '/'

# Characters allowed in a Morse string
MORSE_SYMBOLS = frozenset('.-/ ')
# Characters that mark a string as containing Morse (space alone does not)
MORSE_MARKERS = frozenset('.-/')


class MorseTable:
    """Fixed bidirectional mapping between characters and Morse tokens"""

    def __init__(self, mapping=None):
        if mapping is None:
            mapping = MORSE_CODE
        self._codes = dict(mapping)
        self._characters = {code: char for char, code in self._codes.items()}
        if len(self._characters) != len(self._codes):
            raise ValueError("Morse tokens must be unique per character")

    def lookup_code(self, character):
        """Return the token for a character, or None"""
        return self._codes.get(character)

    def lookup_character(self, token):
        """Return the character for a token, or None"""
        return self._characters.get(token)

    def __len__(self):
        return len(self._codes)

    def __iter__(self):
        return iter(self._codes.items())

    def __contains__(self, character):
        return character in self._codes


class MorseCodec:
    """
    Encode and decode Morse code using a MorseTable

    Lookups are case-sensitive. Characters or tokens missing from the table
    are skipped without raising, so malformed input gives sparse output.
    """

    def __init__(self, table=None):
        self.table = table if table is not None else MorseTable()

    def lookup_code(self, character):
        return self.table.lookup_code(character)

    def lookup_character(self, token):
        return self.table.lookup_character(token)

    def encode(self, text):
        """Convert text to Morse code, tokens separated by single spaces"""
        encoded = []
        for char in text:
            code = self.table.lookup_code(char)
            if code is None:
                logger.debug("Skipping character %r with no Morse code", char)
                continue
            encoded.append(code + ' ')
        return ''.join(encoded).strip()

    def decode(self, morse):
        """Convert Morse code to text, words separated by '/'"""
        decoded = []
        for word in morse.split(WORD_SEPARATOR):
            for token in word.split():
                char = self.table.lookup_character(token)
                if char is None:
                    logger.debug("Skipping unknown Morse token %r", token)
                    continue
                decoded.append(char)
            decoded.append(' ')
        return ''.join(decoded).strip()

    def is_morse(self, text):
        """True if text only holds '.', '-', '/' and spaces"""
        return all(char in MORSE_SYMBOLS for char in text)

    def contains_morse(self, text):
        """True if text holds at least one '.', '-' or '/'"""
        return any(char in MORSE_MARKERS for char in text)

    def translate(self, text):
        """
        Translate each space-delimited word independently: Morse words are
        decoded and plain words are encoded.

        Each Morse token is its own word here, so "... --- ..." comes back
        as "S O S" where decode() gives "SOS".
        """
        translated = []
        for word in text.split(' '):
            if self.is_morse(word):
                translated.append(self.decode(word))
            else:
                translated.append(self.encode(word))
        return ' '.join(translated).strip()


_default_codec = MorseCodec()


def text_to_morse(text):
    """Convert text to Morse code"""
    return _default_codec.encode(text)


def morse_to_text(morse_code):
    """Convert Morse code string to text"""
    return _default_codec.decode(morse_code)
