"""Test payloads and a recording stand-in for the song service."""

import struct

import httpx

# ID3v2.4 header announcing an empty tag, followed by silence
ID3_ONLY_MP3 = b"ID3\x04\x00\x00\x00\x00\x00\x00" + b"\x00" * 64
FRAME_SYNC_MP3 = b"\xff\xfb\x90\x64" + b"\x00" * 64


def id3v24(*frames: bytes) -> bytes:
    """Build a minimal ID3v2.4 tag around the given frames"""
    body = b"".join(frames)
    return b"ID3\x04\x00\x00" + _synchsafe(len(body)) + body


def text_frame(frame_id: str, text: str) -> bytes:
    payload = b"\x00" + text.encode("latin-1")
    return frame_id.encode("ascii") + _synchsafe(len(payload)) + b"\x00\x00" + payload


def _synchsafe(size: int) -> bytes:
    return struct.pack(">4B", (size >> 21) & 0x7F, (size >> 14) & 0x7F, (size >> 7) & 0x7F, size & 0x7F)


class RecordingTransport:
    """httpx handler that records requests and answers with a fixed status"""

    def __init__(self, status_code: int = 200, fail_with: Exception = None):
        self.status_code = status_code
        self.fail_with = fail_with
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        return httpx.Response(self.status_code, json={"id": 1, "ids": []})
