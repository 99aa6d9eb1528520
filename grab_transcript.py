#!/usr/bin/env python3
"""
Print the transcript of a YouTube video, preferring the given languages.

Usage examples
--------------
# 1) English transcript of a video
python grab_transcript.py https://youtu.be/dQw4w9WgXcQ

# 2) prefer English, fall back to Russian
python grab_transcript.py pPjDPe0duXc en ru
"""
from __future__ import annotations

import sys
from pathlib import Path

# Add src to path so we can run without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from yt_transcript.api import TranscriptApi  # noqa: E402
from yt_transcript.cli import resolve_video_id  # noqa: E402
from yt_transcript.errors import TranscriptError  # noqa: E402


def main() -> int:
    if len(sys.argv) < 2:
        print("Usage: python grab_transcript.py <video URL/ID> [language codes...]")
        return 1

    video_id = resolve_video_id(sys.argv[1])
    languages = sys.argv[2:] or ["en", "ru"]

    try:
        transcript = TranscriptApi().get_transcript(video_id, languages)
    except TranscriptError as e:
        print(f"[FAIL] {video_id}: {e}", file=sys.stderr)
        return 1

    print(f"Transcript for video {video_id} in language {transcript.language}:")
    for entry in transcript.entries:
        print(f"[{entry.start:.2f} - {entry.end:.2f}]: {entry.text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
