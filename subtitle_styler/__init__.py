"""Subtitle Styler — prepare SRT subtitles for burning into video.

WHY: Subtitles arrive as loosely formatted SRT, but the burn step needs an
ASS document whose fonts and canvas suit the target video. This package
repairs the SRT, converts it with ffmpeg, and rewrites the ASS styling so
text looks the same on landscape, portrait and square video.

HOW: Three pure text stages (core package) around one external conversion
(converters package), wired by pipeline.SubtitleStyler. The CLI and the
request handler are thin layers over that pipeline.

RULES:
- The core stages never perform I/O
- Converters and storage are passed in, never module-level singletons
"""

__version__ = "0.1.0"
