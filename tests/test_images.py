import pytest

from polyglotscan import images

TIFF_LE = b"II*\x00\x08\x00\x00\x00\x00\x00\x00\x00"
CR2 = b"II*\x00\x10\x00\x00\x00CR\x02\x00"
HEIC = b"\x00\x00\x00\x18ftypheic\x00\x00\x00\x00mif1heic"
AVIF = b"\x00\x00\x00\x1cftypavif\x00\x00\x00\x00avifmif1miaf"
ORA = b"PK\x03\x04" + b"\x00" * 26 + b"mimetypeimage/openraster" + b"\x00" * 10
TEXT = b"hello, this is plain text only"

SAMPLES = {
    "avif": AVIF,
    "bmp": b"BM\x36\x00\x00\x00",
    "cr2": CR2,
    "gif": b"GIF89a\x01\x00",
    "heif": HEIC,
    "ico": b"\x00\x00\x01\x00\x01\x00",
    "jpeg": b"\xff\xd8\xff\xe0\x00\x10JFIF",
    "jpeg2000": b"\x00\x00\x00\x0cjP  \r\n\x87\n\x00\x00\x00\x14",
    "jxl": b"\xff\x0a\xfa\x7f",
    "jxr": b"II\xbc\x01",
    "ora": ORA,
    "png": b"\x89PNG\r\n\x1a\n",
    "psd": b"8BPS\x00\x01",
    "tiff": TIFF_LE,
    "webp": b"RIFF\x24\x00\x00\x00WEBPVP8 ",
}

VARIANTS = {
    "full": lambda sample: sample,
    "empty": lambda sample: b"",
    "text": lambda sample: TEXT,
}


@pytest.mark.parametrize(
    "variant, expected", [("full", True), ("empty", False), ("text", False)]
)
def test_signature_variants(variant, expected):
    data = {name: VARIANTS[variant](sample) for name, sample in SAMPLES.items()}
    results = {
        "avif": bool(images.is_avif(data["avif"])),
        "bmp": bool(images.is_bmp(data["bmp"])),
        "cr2": bool(images.is_cr2(data["cr2"])),
        "gif": bool(images.is_gif(data["gif"])),
        "heif": bool(images.is_heif(data["heif"])),
        "ico": bool(images.is_ico(data["ico"])),
        "jpeg": bool(images.is_jpeg(data["jpeg"])),
        "jpeg2000": bool(images.is_jpeg2000(data["jpeg2000"])),
        "jxl": bool(images.is_jxl(data["jxl"])),
        "jxr": bool(images.is_jxr(data["jxr"])),
        "ora": bool(images.is_ora(data["ora"])),
        "png": bool(images.is_png(data["png"])),
        "psd": bool(images.is_psd(data["psd"])),
        "tiff": bool(images.is_tiff(data["tiff"])),
        "webp": bool(images.is_webp(data["webp"])),
    }
    assert results == dict.fromkeys(SAMPLES, expected)


def test_cr2_and_tiff_are_exclusive():
    assert images.is_cr2(CR2) and not images.is_tiff(CR2)
    assert images.is_tiff(TIFF_LE) and not images.is_cr2(TIFF_LE)


def test_big_endian_tiff():
    assert images.is_tiff(b"MM\x00*\x00\x00\x00\x08\x00\x00")


def test_short_tiff_header_is_rejected():
    assert not images.is_tiff(b"II*\x00\x08")


def test_heif_with_mif1_major_needs_heic_brand():
    with_heic = b"\x00\x00\x00\x18ftypmif1\x00\x00\x00\x00mif1heic"
    without_heic = b"\x00\x00\x00\x18ftypmif1\x00\x00\x00\x00mif1miaf"
    assert images.is_heif(with_heic)
    assert not images.is_heif(without_heic)


def test_avif_through_compatible_brand():
    data = b"\x00\x00\x00\x18ftypmif1\x00\x00\x00\x00avismif1"
    assert images.is_avif(data)
    assert not images.is_heif(data)


def test_ftyp_box_longer_than_data_is_rejected():
    truncated = b"\x00\x00\x01\x00ftypheic\x00\x00\x00\x00mif1"
    assert not images.is_heif(truncated)
    assert not images.is_avif(truncated)


def test_heic_is_not_avif():
    assert not images.is_avif(HEIC)


def test_jxl_container_form():
    assert images.is_jxl(b"\x00\x00\x00\x0cJXL \r\n\x87\n\x00\x00")


def test_ora_needs_minimum_length():
    assert not images.is_ora(ORA[:54])