"""
Tests for the append-only run log.
"""

import re
from datetime import datetime

from pkglists.logsink import LogSink, timestamp

LINE = re.compile(r'^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] (.*)$')


def test_timestamp_format():
    assert timestamp(datetime(2024, 3, 5, 7, 8, 9)) == '2024-03-05 07:08:09'


def test_log_line_format(sink, capsys):
    line = sink.log('hello [DRY-RUN]')
    assert LINE.match(line).group(1) == 'hello [DRY-RUN]'
    assert line in capsys.readouterr().out


def test_appends_across_sinks(tmp_path):
    path = tmp_path / 'nested' / 'dir' / 'run.log'
    LogSink(path, echo=False).log('first')
    LogSink(path, echo=False).log('second')

    lines = path.read_text().splitlines()
    assert [LINE.match(line).group(1) for line in lines] == ['first', 'second']


def test_echo_off(tmp_path, capsys):
    LogSink(tmp_path / 'run.log', echo=False).log('quiet')
    assert 'quiet' not in capsys.readouterr().out
