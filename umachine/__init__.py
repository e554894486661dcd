"""Emulator for the 32-bit Universal Machine: registers, segmented memory, decoder and command."""

__version__ = "0.1.0"