"""Core text engine: cue repair, style injection, canvas rescaling.

WHY: The core package is the pure, synchronous heart of the styler. It
takes text in and returns text out, with no I/O, so every stage can be
tested in isolation from ffmpeg and storage.

HOW: ir.py defines the data structures, cues.py repairs SRT text,
styles.py rewrites ASS Style records, canvas.py rescales the ASS canvas.

RULES:
- No module here touches the filesystem, subprocesses, or the network
- No module-level mutable state; concurrent calls are independent
"""
