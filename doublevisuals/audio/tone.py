"""Tone synthesis: an exponential envelope over a sine oscillator."""

import io
import math
import wave
from abc import ABC, abstractmethod
from array import array
from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_SAMPLE_RATE = 44100
ATTACK_MS = 10.0
# Exponential ramps cannot reach zero.
GAIN_FLOOR = 0.0001
MAX_SAMPLE = 32767


def envelope_gain(t_ms: float, duration_ms: float, peak_gain: float) -> float:
    """Gain at `t_ms`: exponential attack to `peak_gain`, then exponential decay to GAIN_FLOOR."""
    if t_ms <= 0 or duration_ms <= 0:
        return GAIN_FLOOR
    if t_ms >= duration_ms:
        return GAIN_FLOOR
    peak_gain = max(peak_gain, GAIN_FLOOR)
    attack_ms = min(ATTACK_MS, duration_ms / 4)
    if t_ms < attack_ms:
        return GAIN_FLOOR * (peak_gain / GAIN_FLOOR) ** (t_ms / attack_ms)
    decay_progress = (t_ms - attack_ms) / (duration_ms - attack_ms)
    return peak_gain * (GAIN_FLOOR / peak_gain) ** decay_progress


@dataclass(frozen=True)
class RenderedTone:
    frequency_hz: float
    duration_ms: float
    peak_gain: float
    sample_rate: int
    samples: array

    def to_wav(self) -> bytes:
        """16-bit mono WAV encoding of the tone."""
        buffer = io.BytesIO()
        with wave.open(buffer, "wb") as wav:
            wav.setnchannels(1)
            wav.setsampwidth(2)
            wav.setframerate(self.sample_rate)
            wav.writeframes(self.samples.tobytes())
        return buffer.getvalue()


def render_tone(
    frequency_hz: float, duration_ms: float, peak_gain: float, sample_rate: int = DEFAULT_SAMPLE_RATE
) -> RenderedTone:
    """Renders a sine tone to 16-bit PCM. Gains above 1.0 clip at full scale."""
    count = int(sample_rate * duration_ms / 1000)
    samples = array("h")
    for i in range(count):
        t_ms = i * 1000 / sample_rate
        value = math.sin(2 * math.pi * frequency_hz * i / sample_rate)
        sample = int(value * envelope_gain(t_ms, duration_ms, peak_gain) * MAX_SAMPLE)
        samples.append(max(-MAX_SAMPLE, min(MAX_SAMPLE, sample)))
    return RenderedTone(frequency_hz, duration_ms, peak_gain, sample_rate, samples)


class AudioContext(ABC):
    """Output device handle. Construction may fail with AudioUnavailableError."""

    @abstractmethod
    def play_tone(self, frequency_hz: float, duration_ms: float, peak_gain: float) -> None:
        raise NotImplementedError


ToneSink = Callable[[RenderedTone], None]


class SynthAudioContext(AudioContext):
    """Renders tones to PCM and hands them to `sink`; keeps the most recent one."""

    def __init__(self, sample_rate: int = DEFAULT_SAMPLE_RATE, sink: ToneSink | None = None) -> None:
        self.sample_rate = sample_rate
        self._sink = sink
        self.last_tone: RenderedTone | None = None
        self.tones_played = 0

    def play_tone(self, frequency_hz: float, duration_ms: float, peak_gain: float) -> None:
        tone = render_tone(frequency_hz, duration_ms, peak_gain, self.sample_rate)
        self.last_tone = tone
        self.tones_played += 1
        if self._sink is not None:
            self._sink(tone)
