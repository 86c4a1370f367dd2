"""Tests for SounddeviceAudioSource gateway — a MagicMock stands in for the sounddevice module."""

from __future__ import annotations

import importlib
import sys
from unittest.mock import MagicMock, patch

import numpy as np
import pytest

MODULE = 'live_scribe.l3_interface_adapters.gateways.sounddevice_audio_source'


@pytest.fixture
def sd_module():
    """Import the gateway against a fake ``sounddevice`` so no PortAudio is needed."""
    fake_sd = MagicMock()
    with patch.dict(sys.modules, {'sounddevice': fake_sd}):
        sys.modules.pop(MODULE, None)
        module = importlib.import_module(MODULE)
        yield module, fake_sd
    sys.modules.pop(MODULE, None)


class TestSounddeviceAudioSource:
    def test_open_creates_and_starts_stream(self, sd_module):
        module, fake_sd = sd_module

        src = module.SounddeviceAudioSource()
        src.open(16000, 1)

        kwargs = fake_sd.InputStream.call_args.kwargs
        assert kwargs['samplerate'] == 16000
        assert kwargs['channels'] == 1
        assert kwargs['dtype'] == 'float32'
        fake_sd.InputStream.return_value.start.assert_called_once()

    def test_drain_concatenates_callback_blocks(self, sd_module):
        module, fake_sd = sd_module
        src = module.SounddeviceAudioSource()
        src.open(16000, 1)
        callback = fake_sd.InputStream.call_args.kwargs['callback']

        callback(np.array([[0.1], [0.2]], dtype=np.float32), 2, None, None)
        callback(np.array([[0.3]], dtype=np.float32), 1, None, None)

        np.testing.assert_allclose(src.drain(), [0.1, 0.2, 0.3], atol=1e-6)
        assert src.drain() is None

    def test_close_stops_stream_and_discards_buffer(self, sd_module):
        module, fake_sd = sd_module
        src = module.SounddeviceAudioSource()
        src.open(16000, 1)
        callback = fake_sd.InputStream.call_args.kwargs['callback']
        callback(np.array([[0.5]], dtype=np.float32), 1, None, None)

        src.close()

        stream = fake_sd.InputStream.return_value
        stream.stop.assert_called_once()
        stream.close.assert_called_once()
        assert src.drain() is None

    def test_close_without_open_is_safe(self, sd_module):
        module, _ = sd_module
        module.SounddeviceAudioSource().close()
