import numpy as np
import pytest

from glide.audio import CUE_TONES, Tone, synthesize
from glide.world import Cue


def test_every_cue_has_a_tone():
    assert set(CUE_TONES) == set(Cue)


@pytest.mark.parametrize("waveform", ["sine", "triangle", "square", "sawtooth"])
def test_synthesize_length_and_amplitude(waveform):
    tone = Tone(440.0, waveform, 100, 0.05)
    samples = synthesize(tone, 44100)
    assert samples.dtype == np.int16
    assert len(samples) == 4410
    assert np.abs(samples).max() <= int(0.05 * 32767) + 1


def test_unknown_waveform_rejected():
    with pytest.raises(ValueError):
        synthesize(Tone(440.0, "noise", 10, 0.1), 8000)
