"""Security toolkit library: signature lookups, UPX detection, USB and autorun scanning, duplicate finding, recovery and secure deletion."""

__version__ = "0.1.0"