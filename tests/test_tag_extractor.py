"""Tests for metadata extraction and defaulting."""

import pytest

from api.errors import ExtractionFailure
from services.tags.extractor import (
    ALBUM,
    ARTIST,
    DURATION,
    RELEASE_DATE,
    TITLE,
    TagExtractor,
    extract_year,
    format_duration,
    read_raw_tags,
)

from helpers import ID3_ONLY_MP3, id3v24, text_frame


class TestFormatDuration:
    @pytest.mark.parametrize("raw,expected", [
        ("125.7", "02:05"),
        ("0", "00:00"),
        ("59.999", "00:59"),
        ("60", "01:00"),
        ("3599", "59:59"),
        ("6005", "100:05"),
    ])
    def test_truncates_and_pads(self, raw, expected):
        assert format_duration(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "nan", "inf", "-5"])
    def test_unusable_values_fall_back(self, raw):
        assert format_duration(raw) == "00:00"


class TestExtractYear:
    @pytest.mark.parametrize("raw,expected", [
        ("2004-03-01", "2004"),
        ("1999", "1999"),
        ("197", "1900"),
        ("", "1900"),
        (None, "1900"),
    ])
    def test_first_four_characters_or_default(self, raw, expected):
        assert extract_year(raw) == expected


class TestTagExtractor:
    def test_uses_reader_values(self):
        extractor = TagExtractor(reader=lambda data: {
            TITLE: "Song",
            ARTIST: "Band",
            ALBUM: "Record",
            RELEASE_DATE: "2004-03-01",
            DURATION: "125.7",
        })

        metadata = extractor.extract(7, b"ID3...")

        assert metadata.id == 7
        assert metadata.name == "Song"
        assert metadata.artist == "Band"
        assert metadata.album == "Record"
        assert metadata.year == "2004"
        assert metadata.duration == "02:05"

    def test_missing_fields_get_defaults(self):
        extractor = TagExtractor(reader=lambda data: {TITLE: "Only title"})

        metadata = extractor.extract(1, b"ID3")

        assert metadata.name == "Only title"
        assert metadata.artist == "Unknown"
        assert metadata.album == "Unknown"
        assert metadata.duration == "00:00"
        assert metadata.year == "1900"

    def test_reader_error_becomes_extraction_failure(self):
        def broken_reader(data):
            raise RuntimeError("corrupt tag")

        with pytest.raises(ExtractionFailure):
            TagExtractor(reader=broken_reader).extract(1, b"ID3")


class TestReadRawTags:
    def test_reads_id3_frames(self):
        data = id3v24(
            text_frame("TIT2", "Song"),
            text_frame("TPE1", "Band"),
            text_frame("TALB", "Record"),
            text_frame("TDRC", "2004-03-01"),
        ) + b"\x00" * 64

        raw = read_raw_tags(data)

        assert raw[TITLE] == "Song"
        assert raw[ARTIST] == "Band"
        assert raw[ALBUM] == "Record"
        assert raw[RELEASE_DATE] == "2004-03-01"
        assert raw[DURATION] is None

    def test_file_without_tags_or_frames_reads_as_empty(self):
        raw = read_raw_tags(ID3_ONLY_MP3)
        assert all(value is None for value in raw.values())

    def test_extracting_untagged_file_yields_defaults(self):
        metadata = TagExtractor().extract(3, ID3_ONLY_MP3)
        assert (metadata.name, metadata.artist, metadata.album) == ("Unknown", "Unknown", "Unknown")
        assert metadata.duration == "00:00"
        assert metadata.year == "1900"
