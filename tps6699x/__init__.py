"""Byte-stream helpers and a Tx Identity register model for TPS6699x USB PD controllers."""

__version__ = "0.1.0"