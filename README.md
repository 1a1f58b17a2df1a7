# polyglotscan

`polyglotscan` checks one file against a list of file-format signatures
and reports every format that the file matches. A file that matches more
than one format is a *polyglot*. For example, a file might match both
PDF and ZIP.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Command-line use

```
polyglotscan --file-path suspicious.bin
```

Options:

- `-f`, `--file-path`: the file to scan. This option is required.
- `-a`, `--all`: list every known format, not only the matching ones.
  A format that did not match is marked `x`.

By default, the table lists only the formats that the file matches:

```
+----------+------------+
| Format   | Is Valid   |
+==========+============+
| PDF      | ✓          |
+----------+------------+
| ZIP      | ✓          |
+----------+------------+
```

Formats appear in a fixed order: archives, audio, binaries, code,
documents, fonts, images, markup, OpenDocument, and video.

The command exits with status 0 after it prints the table. If the file
cannot be read, or a check cannot run, it writes `Error: ...` to standard
error and exits with status 1.

### The JavaScript check

The `JS` check writes the data to a temporary `.js` file and runs
`node -c` on it. The data counts as JavaScript if node exits
successfully. Every scan runs this check. If `node` is not on your
`PATH`, the whole scan fails with the error described above.

## Library use

Each format family has its own module. Each module holds plain predicates
that take `bytes` and return `bool`:

| Module                   | Predicates |
|--------------------------|------------|
| `polyglotscan.archive`   | `is_7z`, `is_ar`, `is_bz2`, `is_cab`, `is_cpio`, `is_crx`, `is_dcm`, `is_deb`, `is_eot`, `is_epub`, `is_gz`, `is_lz`, `is_msi`, `is_pdf`, `is_ps`, `is_rar`, `is_rpm`, `is_rtf`, `is_sqlite`, `is_swf`, `is_tar`, `is_xz`, `is_z`, `is_zip`, `is_zst` |
| `polyglotscan.audio`     | `is_aac`, `is_aiff`, `is_amr`, `is_ape`, `is_dsf`, `is_flac`, `is_m4a`, `is_midi`, `is_mp3`, `is_ogg`, `is_ogg_opus`, `is_wav` |
| `polyglotscan.binary`    | `is_coff`, `is_coff_i386`, `is_coff_ia64`, `is_coff_x64`, `is_der`, `is_dex`, `is_dey`, `is_dll`, `is_elf`, `is_exe`, `is_java`, `is_llvm`, `is_mach`, `is_nes`, `is_pem`, `is_wasm` |
| `polyglotscan.code`      | `is_js` (needs `node`; raises `OSError` if it cannot be started) |
| `polyglotscan.documents` | `is_doc`, `is_docx`, `is_ppt`, `is_pptx`, `is_xls`, `is_xlsx` |
| `polyglotscan.fonts`     | `is_otf`, `is_ttf`, `is_woff`, `is_woff2` |
| `polyglotscan.images`    | `is_avif`, `is_bmp`, `is_cr2`, `is_gif`, `is_heif`, `is_ico`, `is_jpeg`, `is_jpeg2000`, `is_jxl`, `is_jxr`, `is_ora`, `is_png`, `is_psd`, `is_tiff`, `is_webp` |
| `polyglotscan.markup`    | `is_html`, `is_shellscript`, `is_xml` |
| `polyglotscan.odf`       | `is_odp`, `is_ods`, `is_odt` |
| `polyglotscan.video`     | `is_avi`, `is_flv`, `is_m4v`, `is_mkv`, `is_mov`, `is_mp4`, `is_mpeg`, `is_webm`, `is_wmv` |

```python
from pathlib import Path

from polyglotscan.archive import is_pdf, is_zip
from polyglotscan.images import is_png

data = Path("suspicious.bin").read_bytes()
print(is_pdf(data), is_zip(data), is_png(data))
```

`is_dll` has the same signature as `is_exe`, so the detector list leaves
it out.

### Detectors and scanning

`polyglotscan.base.Detector` is a frozen dataclass with two fields:

- `name`: the format name.
- `check`: a predicate.

Its `detect(data, file_path)` method returns the result of `check(data)`.
The built-in checks look only at the bytes.

`polyglotscan.registry.available_detectors()` returns a list with one
`Detector` for each format shown by the command, in display order.

`polyglotscan.cli.scan(data, file_path, show_all)` runs every detector on
`data`. It returns a list of `(format_name, is_valid)` pairs. Pairs that
did not match are dropped unless `show_all` is true.

`polyglotscan.cli.render_table(results)` formats those pairs as the table
shown above.

`polyglotscan.cli.main(argv=None)` is the entry point for the command. It
returns the exit status.

```python
from polyglotscan.cli import render_table, scan

results = scan(b"%PDF-1.7\n", "sample.pdf", show_all=False)
print(render_table(results))
```

Because every scan includes the JavaScript check, `scan` also needs
`node`.

## What it does not do

- The checks compare header bytes and a few fixed offsets. They do not
  parse or fully validate a file. A match means that the file's signature
  fits a format, not that a reader for that format will accept the file.
- Only JavaScript is checked as source code. No other programming
  languages are detected.
- The scan has no option to skip individual formats, including the
  `node`-based JavaScript check.