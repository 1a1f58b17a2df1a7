"""The ordered catalogue of every format the scanner checks."""

from __future__ import annotations

from polyglotscan import archive, audio, binary, code, documents, fonts, images, markup, odf, video
from polyglotscan.base import Detector

_CATALOGUE = (
    # Archive
    ("7Z", archive.is_7z),
    ("AR", archive.is_ar),
    ("BZ2", archive.is_bz2),
    ("CAB", archive.is_cab),
    ("CPIO", archive.is_cpio),
    ("CRX", archive.is_crx),
    ("DCM", archive.is_dcm),
    ("DEB", archive.is_deb),
    ("EOT", archive.is_eot),
    ("EPUB", archive.is_epub),
    ("GZ", archive.is_gz),
    ("LZ", archive.is_lz),
    ("MSI", archive.is_msi),
    ("PDF", archive.is_pdf),
    ("PS", archive.is_ps),
    ("RAR", archive.is_rar),
    ("RPM", archive.is_rpm),
    ("RTF", archive.is_rtf),
    ("SQLITE", archive.is_sqlite),
    ("SWF", archive.is_swf),
    ("TAR", archive.is_tar),
    ("XZ", archive.is_xz),
    ("Z", archive.is_z),
    ("ZIP", archive.is_zip),
    ("ZST", archive.is_zst),
    # Audio
    ("AAC", audio.is_aac),
    ("AIFF", audio.is_aiff),
    ("AMR", audio.is_amr),
    ("APE", audio.is_ape),
    ("DSF", audio.is_dsf),
    ("FLAC", audio.is_flac),
    ("M4A", audio.is_m4a),
    ("MIDI", audio.is_midi),
    ("MP3", audio.is_mp3),
    ("OGG", audio.is_ogg),
    ("OGG_OPUS", audio.is_ogg_opus),
    ("WAV", audio.is_wav),
    # Binary; DLL shares the EXE signature and is left out.
    ("COFF", binary.is_coff),
    ("COFF_I386", binary.is_coff_i386),
    ("COFF_IA64", binary.is_coff_ia64),
    ("COFF_X64", binary.is_coff_x64),
    ("DER", binary.is_der),
    ("DEX", binary.is_dex),
    ("DEY", binary.is_dey),
    ("ELF", binary.is_elf),
    ("EXE", binary.is_exe),
    ("JAVA", binary.is_java),
    ("LLVM", binary.is_llvm),
    ("MACH", binary.is_mach),
    ("NES", binary.is_nes),
    ("PEM", binary.is_pem),
    ("WASM", binary.is_wasm),
    # Code
    ("JS", code.is_js),
    # Documents
    ("DOC", documents.is_doc),
    ("DOCX", documents.is_docx),
    ("PPT", documents.is_ppt),
    ("PPTX", documents.is_pptx),
    ("XLS", documents.is_xls),
    ("XLSX", documents.is_xlsx),
    # Fonts
    ("OTF", fonts.is_otf),
    ("TTF", fonts.is_ttf),
    ("WOFF", fonts.is_woff),
    ("WOFF2", fonts.is_woff2),
    # Images
    ("AVIF", images.is_avif),
    ("BMP", images.is_bmp),
    ("CR2", images.is_cr2),
    ("GIF", images.is_gif),
    ("HEIF", images.is_heif),
    ("ICO", images.is_ico),
    ("JPEG", images.is_jpeg),
    ("JPEG2000", images.is_jpeg2000),
    ("JXL", images.is_jxl),
    ("JXR", images.is_jxr),
    ("ORA", images.is_ora),
    ("PNG", images.is_png),
    ("PSD", images.is_psd),
    ("TIFF", images.is_tiff),
    ("WEBP", images.is_webp),
    # Markup
    ("HTML", markup.is_html),
    ("SHELLSCRIPT", markup.is_shellscript),
    ("XML", markup.is_xml),
    # OpenDocument
    ("ODP", odf.is_odp),
    ("ODS", odf.is_ods),
    ("ODT", odf.is_odt),
    # Video
    ("AVI", video.is_avi),
    ("FLV", video.is_flv),
    ("M4V", video.is_m4v),
    ("MKV", video.is_mkv),
    ("MOV", video.is_mov),
    ("MP4", video.is_mp4),
    ("MPEG", video.is_mpeg),
    ("WEBM", video.is_webm),
    ("WMV", video.is_wmv),
)


def available_detectors() -> list[Detector]:
    """Return every detector, in the order results are reported."""
    return [Detector(name, check) for name, check in _CATALOGUE]