"""Exceptions raised by benchcmp."""


class BenchcmpError(Exception):
    """Base class for errors reported to the user."""


class ConfigError(BenchcmpError):
    pass


class ReadError(BenchcmpError):
    """An input file could not be read."""

    def __init__(self, path, err):
        self.path = path
        self.err = err
        super().__init__(f'failed to read {path}: {err}')


class EmptyReportError(BenchcmpError):
    """No benchmark results were found for one side of the comparison."""

    def __init__(self, side, source):
        self.side = side
        self.source = source
        super().__init__(f'no benchmark results parsed for {side} ({source})')
