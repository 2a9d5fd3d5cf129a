"""Gesture-gated tone playback."""

from doublevisuals.audio.engine import GestureGatedAudioEngine, get_audio_engine
from doublevisuals.audio.tone import AudioContext, RenderedTone, SynthAudioContext, render_tone

__all__ = [
    "AudioContext",
    "GestureGatedAudioEngine",
    "RenderedTone",
    "SynthAudioContext",
    "get_audio_engine",
    "render_tone",
]
