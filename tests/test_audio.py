import io
import wave

import pytest

from polyglotscan import audio

TEXT = b"just some ordinary text, nothing special"

SAMPLES = {
    "aac": b"\xff\xf1",
    "aiff": b"FORM\x00\x00\x00\x00AIFF",
    "amr": b"#!AMR\n" + b"\x00" * 6,
    "ape": b"MAC \x00",
    "dsf": b"DSD \x00",
    "flac": b"fLaC",
    "m4a": b"\x00\x00\x00\x20ftypM4A",
    "midi": b"MThd",
    "mp3": b"ID3",
    "ogg": b"OggS",
    "ogg_opus": b"OggS" + b"\x00" * 24 + b"OpusHead",
    "wav": b"RIFF\x00\x00\x00\x00WAVE",
}

VARIANTS = {
    "full": lambda sample: sample,
    "truncated": lambda sample: sample[:-1],
    "empty": lambda sample: b"",
    "text": lambda sample: TEXT,
}


@pytest.mark.parametrize(
    "variant, expected",
    [("full", True), ("truncated", False), ("empty", False), ("text", False)],
)
def test_signature_variants(variant, expected):
    data = {name: VARIANTS[variant](sample) for name, sample in SAMPLES.items()}
    results = {
        "aac": audio.is_aac(data["aac"]),
        "aiff": audio.is_aiff(data["aiff"]),
        "amr": audio.is_amr(data["amr"]),
        "ape": audio.is_ape(data["ape"]),
        "dsf": audio.is_dsf(data["dsf"]),
        "flac": audio.is_flac(data["flac"]),
        "m4a": audio.is_m4a(data["m4a"]),
        "midi": audio.is_midi(data["midi"]),
        "mp3": audio.is_mp3(data["mp3"]),
        "ogg": audio.is_ogg(data["ogg"]),
        "ogg_opus": audio.is_ogg_opus(data["ogg_opus"]),
        "wav": audio.is_wav(data["wav"]),
    }
    assert results == dict.fromkeys(SAMPLES, expected)


@pytest.mark.parametrize(
    "check, sample",
    [
        (audio.is_aac, b"\xff\xf9"),
        (audio.is_m4a, b"M4A "),
        (audio.is_mp3, b"\xff\xe2"),
        (audio.is_mp3, b"\xff\xf3"),
        (audio.is_mp3, b"\xff\xfb"),
    ],
)
def test_alternate_signatures(check, sample):
    assert check(sample) is True


@pytest.mark.parametrize(
    "check, sample",
    [
        (audio.is_aac, b"\xff\xf2"),
        (audio.is_aiff, b"FORM\x00\x00\x00\x00AIFC"),
        (audio.is_wav, b"RIFF\x00\x00\x00\x00AVI "),
        (audio.is_mp3, b"\xff\xe0"),
        (audio.is_ogg_opus, b"OggS" + b"\x00" * 24 + b"OpusTags"),
    ],
)
def test_near_miss_signatures_rejected(check, sample):
    assert check(sample) is False


def test_real_wave_file():
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(8000)
        wav.writeframes(b"\x00\x00" * 16)
    data = buffer.getvalue()
    assert audio.is_wav(data) is True
    assert audio.is_aiff(data) is False


def test_ogg_opus_is_also_ogg():
    assert audio.is_ogg(SAMPLES["ogg_opus"]) is True


def test_plain_ogg_is_not_opus():
    assert audio.is_ogg_opus(SAMPLES["ogg"] + b"\x00" * 40) is False


def test_amr_needs_twelve_bytes():
    assert audio.is_amr(b"#!AMR\n") is False
    assert audio.is_amr(b"#!AMR\n" + b"\x00" * 10) is True