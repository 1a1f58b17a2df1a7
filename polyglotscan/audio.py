"""Signature checks for audio formats."""

from __future__ import annotations


def is_aac(data: bytes) -> bool:
    """AAC in an ADTS stream."""
    return data[:2] in (b"\xff\xf1", b"\xff\xf9")


def is_aiff(data: bytes) -> bool:
    """Audio Interchange File Format."""
    return data.startswith(b"FORM") and data[8:12] == b"AIFF"


def is_amr(data: bytes) -> bool:
    """Adaptive Multi-Rate audio."""
    return len(data) > 11 and data.startswith(b"#!AMR\n")


def is_ape(data: bytes) -> bool:
    """Monkey's Audio."""
    return len(data) > 4 and data.startswith(b"MAC ")


def is_dsf(data: bytes) -> bool:
    """DSD Stream File."""
    return len(data) > 4 and data.startswith(b"DSD ")


def is_flac(data: bytes) -> bool:
    """Free Lossless Audio Codec."""
    return data.startswith(b"fLaC")


def is_m4a(data: bytes) -> bool:
    """MPEG-4 audio."""
    return data[4:11] == b"ftypM4A" or data.startswith(b"M4A ")


def is_midi(data: bytes) -> bool:
    """Standard MIDI file."""
    return data.startswith(b"MThd")


def is_mp3(data: bytes) -> bool:
    """MP3, either with an ID3 tag or starting at a frame sync."""
    return data.startswith(b"ID3") or data[:2] in (b"\xff\xe2", b"\xff\xf3", b"\xff\xfb")


def is_ogg(data: bytes) -> bool:
    """Ogg container."""
    return data.startswith(b"OggS")


def is_ogg_opus(data: bytes) -> bool:
    """Opus audio in an Ogg container."""
    return data.startswith(b"OggS") and data[28:36] == b"OpusHead"


def is_wav(data: bytes) -> bool:
    """RIFF WAVE audio."""
    return data.startswith(b"RIFF") and data[8:12] == b"WAVE"