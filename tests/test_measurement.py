import pytest

from benchcmp.measurement import (
    Measurement,
    format_number,
    parse_annotated,
    parse_legacy,
    parse_line,
    parse_number,
    parse_plain,
)


@pytest.mark.parametrize('line, expected', [
    ('test foo ... bench: 100 ns/iter (+/- 5)', Measurement('foo', 100, variance=5)),
    ('test mod::bar  ... bench:   1,234,567 ns/iter (+/- 8,910)',
     Measurement('mod::bar', 1234567, variance=8910)),
    ('test parse ... bench: 2,200 ns/iter (+/- 40) = 512 MB/s',
     Measurement('parse', 2200, throughput=512, variance=40)),
    ('test copy ... bench: 2,200 ns/iter (1,024 MB/s)', Measurement('copy', 2200, throughput=1024)),
    ('test bare ... bench: 17 ns/iter', Measurement('bare', 17)),
    ('    test indented ... bench: 9 ns/iter (+/- 0)   ', Measurement('indented', 9, variance=0)),
])
def test_legacy(line, expected):
    assert parse_line(line) == expected


def test_legacy_fractional_values_are_rounded():
    line = 'test frac ... bench:       1,234.56 ns/iter (+/- 12.40)'
    assert parse_line(line) == Measurement('frac', 1235, variance=12)


@pytest.mark.parametrize('line, expected', [
    ('copy/small 1,024 ns/iter (1,000 MB/s)', Measurement('copy/small', 1024, throughput=1000)),
    ('bench memcpy   64 ns/iter (16,000 MB/s)', Measurement('memcpy', 64, throughput=16000)),
    ('test memset 8 ns/iter (2 MB/s)', Measurement('memset', 8, throughput=2)),
])
def test_annotated(line, expected):
    measurement = parse_line(line)
    assert measurement == expected
    assert measurement.variance is None


@pytest.mark.parametrize('line, expected', [
    ('a::x 10 ns/iter', Measurement('a::x', 10)),
    ('bench b::x   20 ns/iter', Measurement('b::x', 20)),
    ('checksum          512 ns/iter', Measurement('checksum', 512)),
])
def test_plain(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize('line', [
    '',
    '   ',
    'running 4 tests',
    'test result: ok. 0 passed; 0 failed; 0 ignored; 4 measured',
    'test foo ... ok',
    'test foo ... bench: lots ns/iter',
    'foo 10 ms/iter',
    'foo time: [1.0 ns 1.1 ns 1.2 ns]',
    '123 45 ns/iter',
    'foo 10 ns/iter trailing garbage',
    'test foo ... bench: 100 ns/iter (+/- 5) (512 MB/s)',
])
def test_not_a_measurement(line):
    assert parse_line(line) is None


def test_bench_marker_selects_legacy():
    line = 'test foo ... bench: 100 ns/iter (+/- 5)'
    assert parse_annotated(line) is None
    assert parse_plain(line) is None
    assert parse_legacy(line).name == 'foo'


def test_measurement_is_immutable():
    m = Measurement('foo', 1)
    with pytest.raises(AttributeError):
        m.value = 2


def test_renamed_keeps_fields():
    m = Measurement('a::foo', 10, throughput=3, variance=1)
    assert m.renamed('foo') == Measurement('foo', 10, throughput=3, variance=1)


@pytest.mark.parametrize('text, value', [
    ('0', 0),
    ('999', 999),
    ('1,000', 1000),
    ('1,234,567', 1234567),
    ('-4,130', -4130),
    ('2.4', 2),
    ('3.5', 4),
])
def test_parse_number(text, value):
    assert parse_number(text) == value


@pytest.mark.parametrize('value, text', [
    (0, '0'),
    (999, '999'),
    (1000, '1,000'),
    (-50, '-50'),
    (-1234567, '-1,234,567'),
])
def test_format_number(value, text):
    assert format_number(value) == text
    assert parse_number(text) == value
