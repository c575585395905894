#!/usr/bin/env python3
"""
Morse Code Audio Generator
Converts text to Morse code, plays it on the default audio device and
saves it as a WAV (or any pydub-supported) file
"""

import argparse
import logging
import sys
import time

import numpy as np
from pydub import AudioSegment

from morse_code import MorseCodec
from morse_tones import SAMPLE_RATE, ToneGenerator, ToneKind

logger = logging.getLogger(__name__)

# Pause after every played symbol (in seconds)
PAUSE_DURATION = 0.5

# 16-bit PCM output
SAMPLE_WIDTH = 2
PCM_MAX = 32767


class DeviceError(RuntimeError):
    """The audio output device could not be used"""


class SoundDeviceOutput:
    """Blocking playback of finite buffers through sounddevice"""

    def __init__(self, sd):
        self._sd = sd

    def play(self, samples, sample_rate):
        try:
            self._sd.play(samples, samplerate=sample_rate, blocking=True)
        except self._sd.PortAudioError as e:
            raise DeviceError(f"Playback failed: {e}") from e


def open_output_device():
    """Acquire the default output device"""
    try:
        # Raises OSError when the PortAudio library is missing
        import sounddevice as sd
    except OSError as e:
        raise DeviceError(f"Audio output unavailable: {e}") from e

    try:
        sd.query_devices(kind='output')
    except (sd.PortAudioError, ValueError) as e:
        raise DeviceError(f"No default output device: {e}") from e
    return SoundDeviceOutput(sd)


def samples_to_pcm(samples):
    """Convert float samples to 16-bit integers, truncating toward zero"""
    scaled = np.asarray(samples, dtype=np.float32) * np.float32(PCM_MAX)
    # saturate like a float -> int16 cast instead of wrapping
    scaled = np.clip(scaled, -PCM_MAX - 1, PCM_MAX)
    return scaled.astype('<i2')


def to_audio_segment(samples, sample_rate=SAMPLE_RATE):
    """Wrap float samples in a mono 16-bit AudioSegment"""
    return AudioSegment(
        data=samples_to_pcm(samples).tobytes(),
        sample_width=SAMPLE_WIDTH,
        frame_rate=sample_rate,
        channels=1,
    )


def export_audio(output_file, samples, sample_rate=SAMPLE_RATE, audio_format="wav"):
    """
    Write float samples to an audio file

    WAV files are written directly. Other formats are handed to ffmpeg by
    pydub. Errors opening or writing the file propagate as OSError and a
    partly written file is left in place.
    """
    audio = to_audio_segment(samples, sample_rate)
    with open(output_file, 'wb') as out_f:
        audio.export(out_f, format=audio_format)
    logger.info("Saved %d samples at %d Hz to %s", len(samples), sample_rate,
                output_file)


def audio_format_for(output_file):
    """Determine export format from extension"""
    if output_file.endswith('.mp3'):
        return "mp3"
    return "wav"


class MorseAudio:
    """
    Sounds Morse code strings

    Every character of the Morse string is mapped to a tone: '.' is a dot,
    '-' a dash and anything else (spaces and '/') the silence tone.
    """

    def __init__(self, tones=None, pause=PAUSE_DURATION, output=None):
        self.tones = tones if tones is not None else ToneGenerator()
        self.pause = pause
        self._open_output = output if output is not None else open_output_device

    @property
    def sample_rate(self):
        return self.tones.sample_rate

    def set_sample_rate(self, sample_rate):
        self.tones.set_sample_rate(sample_rate)

    def set_pause(self, pause):
        """Change the time waited after each played symbol"""
        self.pause = pause

    def play_tone(self, kind):
        """Play a single tone on the default output device"""
        device = self._open_output()
        device.play(self.tones.render_tone(kind), self.sample_rate)

    def play_dot(self):
        self.play_tone(ToneKind.DOT)

    def play_dash(self):
        self.play_tone(ToneKind.DASH)

    def play_silence(self):
        self.play_tone(ToneKind.SILENCE)

    def play(self, morse_code):
        """Play a Morse code string symbol by symbol, pausing after each"""
        device = self._open_output()
        logger.info("Playing Morse code: %s", morse_code)
        for symbol in morse_code:
            kind = ToneKind.for_symbol(symbol)
            logger.debug("Symbol %r -> %s", symbol, kind.value)
            device.play(self.tones.render_tone(kind), self.sample_rate)
            time.sleep(self.pause)

    def render(self, morse_code):
        """Samples for a Morse code string, without pauses"""
        return self.tones.render_sequence(morse_code)

    def to_audio_segment(self, morse_code):
        return to_audio_segment(self.render(morse_code), self.sample_rate)

    def render_to_file(self, morse_code, output_file, audio_format="wav"):
        """Save a Morse code string as a mono 16-bit audio file"""
        export_audio(output_file, self.render(morse_code), self.sample_rate,
                     audio_format)


class Morse:
    """Text/Morse translation and Morse audio behind one object"""

    def __init__(self, codec=None, audio=None):
        self.codec = codec if codec is not None else MorseCodec()
        self.audio = audio if audio is not None else MorseAudio()

    # Translation

    def encode(self, text):
        return self.codec.encode(text)

    def decode(self, morse_code):
        return self.codec.decode(morse_code)

    def is_morse(self, text):
        return self.codec.is_morse(text)

    def contains_morse(self, text):
        return self.codec.contains_morse(text)

    def lookup_code(self, character):
        return self.codec.lookup_code(character)

    def lookup_character(self, token):
        return self.codec.lookup_character(token)

    def translate(self, text):
        return self.codec.translate(text)

    # Audio

    def play(self, morse_code):
        self.audio.play(morse_code)

    def play_dot(self):
        self.audio.play_dot()

    def play_dash(self):
        self.audio.play_dash()

    def play_silence(self):
        self.audio.play_silence()

    def render_tone(self, kind):
        return self.audio.tones.render_tone(kind)

    def render_to_file(self, morse_code, output_file, audio_format="wav"):
        self.audio.render_to_file(morse_code, output_file, audio_format)

    def set_dot(self, frequency=None, duration=None, amplitude=None):
        self.audio.tones.set_dot(frequency, duration, amplitude)

    def set_dash(self, frequency=None, duration=None, amplitude=None):
        self.audio.tones.set_dash(frequency, duration, amplitude)

    def set_silence(self, frequency=None, duration=None, amplitude=None):
        self.audio.tones.set_silence(frequency, duration, amplitude)

    def set_pause(self, pause):
        self.audio.set_pause(pause)

    def set_sample_rate(self, sample_rate):
        self.audio.set_sample_rate(sample_rate)


def save_morse_audio(morse, text, output_file):
    """Convert text to Morse code audio and save as WAV or MP3"""
    print(f"Converting text to Morse code: '{text}'")

    code = morse.encode(text.upper())
    print(f"Morse code: {code}")

    print(f"Saving to {output_file}...")
    morse.render_to_file(code, output_file, audio_format_for(output_file))
    print(f"Successfully created {output_file}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="morse-generator",
        description="Translate between text and Morse code and sound it out",
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log progress to stderr")
    parser.add_argument("--pause", type=float, default=PAUSE_DURATION,
                        help="seconds to wait after each played symbol")
    parser.add_argument("--sample-rate", type=int, default=SAMPLE_RATE)
    parser.add_argument("--amplitude", type=float, default=None,
                        help="amplitude of every tone, 0 to 1")
    parser.add_argument("--dot-frequency", type=float, default=None)
    parser.add_argument("--dot-duration", type=float, default=None)
    parser.add_argument("--dash-frequency", type=float, default=None)
    parser.add_argument("--dash-duration", type=float, default=None)
    parser.add_argument("--silence-duration", type=float, default=None)

    commands = parser.add_subparsers(dest="command", required=True)
    encode = commands.add_parser("encode", help="text to Morse code")
    encode.add_argument("text", nargs="+")
    decode = commands.add_parser("decode", help="Morse code to text")
    decode.add_argument("morse")
    translate = commands.add_parser("translate", help="translate word by word")
    translate.add_argument("text", nargs="+")
    play = commands.add_parser("play", help="play Morse code")
    play.add_argument("morse")
    wav = commands.add_parser("wav", help="save Morse code as an audio file")
    wav.add_argument("morse")
    wav.add_argument("output")
    save = commands.add_parser("save", help="save text as Morse audio")
    save.add_argument("output")
    save.add_argument("text", nargs="+")
    return parser


def configure(morse, args):
    """Apply command line tone options"""
    tones = morse.audio.tones
    tones.set_dot(args.dot_frequency, args.dot_duration, args.amplitude)
    tones.set_dash(args.dash_frequency, args.dash_duration, args.amplitude)
    tones.set_silence(duration=args.silence_duration, amplitude=args.amplitude)
    morse.set_pause(args.pause)
    morse.set_sample_rate(args.sample_rate)


def main(argv=None):
    """Main console application"""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    morse = Morse()
    configure(morse, args)

    print("=" * 50)
    print("Morse Code Audio Generator")
    print("=" * 50)

    try:
        if args.command == "encode":
            print(morse.encode(' '.join(args.text).upper()))
        elif args.command == "decode":
            print(morse.decode(args.morse))
        elif args.command == "translate":
            print(morse.translate(' '.join(args.text)))
        elif args.command == "play":
            morse.play(args.morse)
        elif args.command == "wav":
            morse.render_to_file(args.morse, args.output,
                                 audio_format_for(args.output))
            print(f"Successfully created {args.output}")
        elif args.command == "save":
            save_morse_audio(morse, ' '.join(args.text), args.output)
    except (DeviceError, OSError) as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
