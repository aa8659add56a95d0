# cybergod

A security toolkit library. It looks files up in a SQLite store of known-bad
MD5 signatures, spots UPX-packed Windows executables, sorts the files of a
removable drive, follows the programs an `autorun.inf` launches, removes
shortcut-virus infections, finds duplicate files, recovers documents and
images from a recycle bin and securely deletes files.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from cybergod.signatures import SignatureDatabase
from cybergod.usb import UsbScanner

with SignatureDatabase("ksgmprh.db") as db:
    db.add("781770fda3bd3236d0ab8274577dddde", "Example.Variant")
    scanner = UsbScanner(db)
    if scanner.initialize("E:\\"):          # False unless the drive is removable
        print(scanner.malicious_files)       # known signatures
        print(scanner.semi_malicious_files)  # UPX-packed
        print(scanner.files_scanned_in_pc)   # autorun targets and .exe files
```

```python
from cybergod.duplicates import DuplicateFinder
from cybergod.maintainer import Journal

finder = DuplicateFinder(Journal("journal.db"))
finder.scan("/path/to/photos")
duplicates = finder.find_the_duplicates()
finder.write_report("duplicates.html")   # also records the totals in the journal
```

## Modules

- `cybergod.hashing`: `md5_file`, `md5_bytes`, `md5_string` and `sha512_hex`, lowercase hex digests.
- `cybergod.extensions`: `is_image`, `is_media`, `is_document`, `is_common_extension` (extensions that often carry malware) and `is_shortcut` (`.lnk`).
- `cybergod.utilities`: `DriveType` and `drive_type` (via psutil; a path that is no mounted root gives `NO_ROOT_DIR`), `walk_files`, `file_extension`, `remove_file`, `ram_size_gb`, `to_utf8`, `timestamp`.
- `cybergod.pe`: `section_names` reads the section table of a PE file; `is_upx` is True when a section name starts with `UPX`.
- `cybergod.signatures`: `SignatureDatabase` with `add`, `contains`, `create_tables` and `close`; usable as a context manager. Hashes are kept in one table per leading character: `a` to `z`, and `zero` to `nine` for digits (`table_for_hash`).
- `cybergod.usb.UsbScanner`: classifies every file of a removable drive as a known threat, UPX-packed, or one to look for on the PC.
- `cybergod.autorun`: `parse_autorun` returns the `open=` targets of autorun text; `AutorunAnalyzer` hashes those programs and finds identical copies below a directory or across drives (`locate`).
- `cybergod.shortcut.ShortcutVirusRemover`: on a removable drive, finds `.lnk` files and suspect programs, deletes the shortcuts and runs `attrib -h -r -s /s /d` to unhide files (Windows only).
- `cybergod.duplicates`: `DuplicateFinder` groups files by size, confirms by MD5 and writes an HTML table; `is_extension_suited` picks images, media and documents.
- `cybergod.recovery.Recovery`: copies documents and images out of `$RECYCLE.BIN`, and `$`-named ones from the drive, into a `CyberGod Recovery Data` folder.
- `cybergod.shredder`: `overwrite_file` writes Gutmann-style patterns; `secure_delete` overwrites, renames to the SHA-512 of the path and deletes; `shred_directory` does so for every file below a folder.
- `cybergod.maintainer.Journal`: timestamped status rows for the duplicate, recovery and shortcut tools in a SQLite file.
- `cybergod.verifier`: `Verifier` and `boot_loader` compare `Adder.py`, `Hunter.py` and `process_hunter.py` with the hashes recorded in an existing `hashes` table, asking before accepting a change.
- `cybergod.virustotal`: `scan_hash` runs `Hunter.scan(md5)` from a `Hunter` module in a given folder; `scan_from_log` does so for every existing, commonly infected file listed in a log (`cybergod.extractor.extract_locations`).
- `cybergod.plugin`: `get_available_plugins` reads a list of plugin paths; `execute_plugin` runs one with the current Python.
- `cybergod.identity`: `system_identity` and `format_identity` describe the OS, user, host, RAM and drives.
- `cybergod.html.HtmlReport` and `cybergod.scheduler.Scheduler`: the report writer and the set of locations put aside for later.

## What this package does not do

- There is no command-line program or interactive menu; everything is used from Python.
- There is no single scanner that walks a directory applying the signature, UPX and string rules and writes a detection report; `UsbScanner` covers a removable drive only.
- No `Hunter` lookup script and no signature data are included; `scan_hash` needs a `Hunter` module supplied by you, and the signature database starts empty.