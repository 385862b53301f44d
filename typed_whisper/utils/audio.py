import librosa
import numpy as np

WHISPER_SAMPLE_RATE = 16000


def pcm16_to_float32(pcm_bytes):
    """PCM16 bytes → float32 numpy array"""
    return np.frombuffer(pcm_bytes, dtype="<i2").astype(np.float32) / 32768.0


def ensure_16k(audio, src_rate):
    """Resample input audio to Whisper's required 16 kHz when needed."""
    if src_rate <= 0:
        raise ValueError("sample_rate must be positive")
    if src_rate == WHISPER_SAMPLE_RATE:
        return audio
    return librosa.resample(audio, orig_sr=src_rate, target_sr=WHISPER_SAMPLE_RATE)


def duration_seconds(audio, sample_rate: int = WHISPER_SAMPLE_RATE) -> float:
    """Return the duration of a sample buffer in seconds."""
    if sample_rate <= 0:
        return 0.0
    return len(audio) / float(sample_rate)
