"""
MemSafe App - Scoped buffer summation and speaker demo

A small library and program that sums integer sequences, including a
fixed-size buffer held under scoped acquisition/release, and voices a
closed set of speakers (Dog, Cat) through a shared speak capability.
"""

__version__ = "0.1.0"
__author__ = "MemSafe Team"
