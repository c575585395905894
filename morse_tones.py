#!/usr/bin/env python3
"""
Morse Tone Generator
Synthesizes the dot, dash and silence tones used to sound Morse code
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

logger = logging.getLogger(__name__)

# Tone parameters (frequency in Hz, duration in seconds)
DOT_FREQUENCY = 329.63
DOT_DURATION = 0.5
DASH_FREQUENCY = 392.0
DASH_DURATION = 1.0
SILENCE_FREQUENCY = 0.0
SILENCE_DURATION = 1.0
AMPLITUDE = 0.20

# Audio parameters
SAMPLE_RATE = 44100


class ToneKind(Enum):
    DOT = 'dot'
    DASH = 'dash'
    SILENCE = 'silence'

    @classmethod
    def for_symbol(cls, symbol):
        """Tone sounded for one character of a Morse string"""
        if symbol == '.':
            return cls.DOT
        if symbol == '-':
            return cls.DASH
        return cls.SILENCE


@dataclass(frozen=True)
class ToneSpec:
    frequency: float
    duration: float
    amplitude: float = AMPLITUDE


DEFAULT_TONES = {
    ToneKind.DOT: ToneSpec(DOT_FREQUENCY, DOT_DURATION),
    ToneKind.DASH: ToneSpec(DASH_FREQUENCY, DASH_DURATION),
    ToneKind.SILENCE: ToneSpec(SILENCE_FREQUENCY, SILENCE_DURATION),
}


def sine_tone(frequency, duration, amplitude, sample_rate=SAMPLE_RATE):
    """Generate a sine wave tone as float32 samples"""
    num_samples = int(round(duration * sample_rate))
    t = np.arange(num_samples) / sample_rate
    samples = amplitude * np.sin(2 * np.pi * frequency * t)
    return samples.astype(np.float32)


class ToneGenerator:
    """
    Holds the configuration of the three Morse tones and renders them

    The silence tone is a 0 Hz sine with the usual amplitude scaling rather
    than a buffer of zeros built separately. Buffers are synthesized on every
    call; nothing is cached between calls.
    """

    def __init__(self, tones=None, sample_rate=SAMPLE_RATE):
        self._tones = dict(DEFAULT_TONES)
        if tones:
            self._tones.update(tones)
        self.sample_rate = sample_rate

    def tone(self, kind):
        return self._tones[kind]

    def set_tone(self, kind, frequency=None, duration=None, amplitude=None):
        """Replace some or all parameters of one tone"""
        changes = {}
        if frequency is not None:
            changes['frequency'] = frequency
        if duration is not None:
            changes['duration'] = duration
        if amplitude is not None:
            changes['amplitude'] = amplitude
        self._tones[kind] = replace(self._tones[kind], **changes)
        logger.debug("%s tone set to %s", kind.value, self._tones[kind])

    def set_dot(self, frequency=None, duration=None, amplitude=None):
        self.set_tone(ToneKind.DOT, frequency, duration, amplitude)

    def set_dash(self, frequency=None, duration=None, amplitude=None):
        self.set_tone(ToneKind.DASH, frequency, duration, amplitude)

    def set_silence(self, frequency=None, duration=None, amplitude=None):
        self.set_tone(ToneKind.SILENCE, frequency, duration, amplitude)

    def set_sample_rate(self, sample_rate):
        self.sample_rate = sample_rate

    def render_tone(self, kind):
        """Generate the samples for one tone kind"""
        spec = self._tones[kind]
        return sine_tone(spec.frequency, spec.duration, spec.amplitude,
                         self.sample_rate)

    def render_sequence(self, morse_code):
        """Concatenate the tone of every character, with no gaps added"""
        rendered = {}
        buffers = []
        for symbol in morse_code:
            kind = ToneKind.for_symbol(symbol)
            if kind not in rendered:
                rendered[kind] = self.render_tone(kind)
            buffers.append(rendered[kind])
        if not buffers:
            return np.zeros(0, dtype=np.float32)
        return np.concatenate(buffers)
