# Path: stream_decoder/tests/unit/test_programs/test_chunked.py
"""
Tests for the chunked record program.
"""

import pytest

from stream_decoder.loaders import iter_byte_chunks
from stream_decoder.process.decoder import Decoder, DecoderPhase
from stream_decoder.process.programs import (
    RecordCollector,
    RecordFormatError,
    chunked_records,
    encode_chunked,
    read_chunked_record,
)
from stream_decoder.process.programs.chunked import parse_record_length


class TestChunkedRecords:
    """Decode the sample record stream."""

    def test_whole_stream_in_one_call(self, chunked_stream):
        sink = RecordCollector()
        decoder = Decoder(chunked_records(sink))

        decoder.decode(chunked_stream)

        assert sink.records == [b'Hello world', b'Awesome!']
        assert sink.ended is True
        assert sink.end_count == 1
        assert decoder.buffered == b''

    def test_one_byte_per_call(self, chunked_stream):
        sink = RecordCollector()
        decoder = Decoder(chunked_records(sink))

        for chunk in iter_byte_chunks(chunked_stream, 1):
            decoder.decode(chunk)

        assert sink.records == [b'Hello world', b'Awesome!']
        assert sink.end_count == 1
        assert decoder.buffered == b''

    def test_record_waits_for_terminator(self):
        sink = RecordCollector()
        decoder = Decoder(chunked_records(sink))

        decoder.decode(b'3\nabc\n')
        assert sink.records == []

        decoder.decode(b'\n')
        assert sink.records == [b'abc']

    def test_callbacks(self, chunked_stream):
        seen = []
        sink = RecordCollector(
            on_record=seen.append,
            on_end=lambda: seen.append('end'),
        )
        decoder = Decoder(chunked_records(sink))

        decoder.decode(chunked_stream)

        assert seen == [b'Hello world', b'Awesome!', 'end']

    def test_record_may_contain_terminators(self):
        sink = RecordCollector()
        decoder = Decoder(chunked_records(sink))

        decoder.decode(encode_chunked([b'a\n\nb']))

        assert sink.records == [b'a\n\nb']

    def test_stops_after_first_record_without_auto_restart(self, chunked_stream):
        sink = RecordCollector()
        decoder = Decoder(chunked_records(sink), {'auto_restart': False})

        decoder.decode(chunked_stream)

        assert sink.records == [b'Hello world']
        assert decoder.phase is DecoderPhase.DONE
        assert decoder.buffered == b'8\nAwesome!\n\n0\n\n'

    def test_invalid_length_line(self):
        decoder = Decoder(chunked_records(RecordCollector()))

        with pytest.raises(RecordFormatError):
            decoder.decode(b'zz\n')
        assert decoder.phase is DecoderPhase.FAILED


class TestSubProgram:
    """read_chunked_record composed with yield from."""

    def test_framed_record(self):
        sink = RecordCollector()
        results = []

        def framed():
            yield b'REC '
            results.append((yield from read_chunked_record(sink)))

        decoder = Decoder(framed)
        decoder.decode(b'REC 2\nhi\n\nREC 0\n\n')

        assert results == [b'hi', None]
        assert sink.records == [b'hi']
        assert sink.ended is True


class TestParseRecordLength:
    """Hexadecimal length lines."""

    @pytest.mark.parametrize('line, expected', [
        (b'0', 0),
        (b'8', 8),
        (b'B', 11),
        (b'b', 11),
        (b'1F4', 500),
    ])
    def test_valid(self, line, expected):
        assert parse_record_length(line) == expected

    @pytest.mark.parametrize('line', [b'', b'xyz', b'-1'])
    def test_invalid(self, line):
        with pytest.raises(RecordFormatError):
            parse_record_length(line)


class TestEncodeChunked:
    """Encoder for the record format."""

    def test_matches_sample_stream(self, chunked_stream):
        assert encode_chunked([b'Hello world', 'Awesome!']) == chunked_stream

    def test_without_end_marker(self):
        assert encode_chunked([b'abc'], terminate=False) == b'3\nabc\n\n'

    def test_uppercase_hex(self):
        assert encode_chunked([b'x' * 255], terminate=False).startswith(b'FF\n')

    def test_rejects_empty_record(self):
        with pytest.raises(ValueError):
            encode_chunked([b''])
